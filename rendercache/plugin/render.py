import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..core.interface import EvaluatorInterface, HostInterface, PluginInterface
from ..core.mytyping import (
    CacheConfig,
    HashType,
    PathType,
    RenderedOutput,
    SubConfigType,
)
from ..gate.invalidation import InvalidationGate
from ..utils.config import sub_config_to_dict
from ..utils.references import normalize_path
from .evaluate import TemplateEvaluator


logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = Path(__file__).parent / "default_index.html"


class RenderPluginConfig(BaseModel, frozen=True):
    cache: bool = True
    template: str|None = None
    filename: str = "index.html"
    title: str = "App"
    template_parameters: dict[str, Any] = {}

    @classmethod
    def from_config(cls, sub_config: SubConfigType) -> "RenderPluginConfig":
        return cls(**sub_config_to_dict(sub_config))

    @property
    def cache_config(self) -> CacheConfig:
        return CacheConfig(caching_enabled=self.cache)

    @property
    def template_path(self) -> PathType:
        template = self.template if self.template is not None else DEFAULT_TEMPLATE
        return normalize_path(template)


class TemplateRenderPlugin(PluginInterface):
    """
    Renders one template into one emitted asset per build cycle.

    The template is compiled by the host on every cycle; the plugin's
    InvalidationGate decides whether the compiled result has to be rendered
    again.
    """
    def __init__(
        self,
        config: RenderPluginConfig|None = None,
        evaluator: EvaluatorInterface|None = None,
        **options: Any,
    ):
        if config is not None and options:
            raise ValueError("Pass either a RenderPluginConfig or keyword options, not both")
        self.config = config if config is not None else RenderPluginConfig(**options)
        if evaluator is None:
            evaluator = TemplateEvaluator(self.template_parameters)
        self.evaluator = evaluator
        self.gate = InvalidationGate(evaluator=evaluator, cache_config=self.config.cache_config)

    @classmethod
    def from_config(cls, sub_config: SubConfigType) -> "TemplateRenderPlugin":
        return cls(config=RenderPluginConfig.from_config(sub_config))

    @property
    def name(self) -> str:
        return f'{type(self).__name__} for "{self.config.filename}"'

    @property
    def template_parameters(self) -> dict[str, Any]:
        return {
            "title": self.config.title,
            "filename": self.config.filename,
            **self.config.template_parameters,
        }

    @property
    def evaluation_count(self) -> int:
        return self.gate.evaluation_count

    @property
    def child_compiler_hash(self) -> HashType|None:
        return self.gate.compilation_hash

    def run_cycle(self, host: HostInterface) -> None:
        result = host.run_child_compilation(self.name, self.config.template_path)
        rendered: RenderedOutput = self.gate.process(result)
        logger.debug("Emitting %s from %s", self.config.filename, self.name)
        host.emit_asset(self.config.filename, rendered)
