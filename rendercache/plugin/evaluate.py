from string import Template
from typing import Any

from ..core.errors import EvaluationFailure
from ..core.interface import EvaluatorInterface
from ..core.mytyping import ChildCompilationResult, CompiledModule, PathType
from ..utils.references import INCLUDE_PATTERN, resolve_reference


class TemplateEvaluator(EvaluatorInterface):
    """
    Renders the entry module of a template compilation.

    Partials referenced with `<!-- include: path -->` are inlined from the
    compiled modules, then `$name` placeholders are filled from the template
    parameters.
    """
    def __init__(self, template_parameters: dict[str, Any]|None = None):
        self.template_parameters = dict(template_parameters or {})

    def evaluate(self, result: ChildCompilationResult) -> str:
        modules = result.modules_by_path()
        if result.entry not in modules:
            raise EvaluationFailure(f"Entry template {result.entry} is missing from {result.name}")
        text = self._inline_includes(modules[result.entry], modules, stack=())
        try:
            return Template(text).substitute(self.template_parameters)
        except (KeyError, ValueError) as error:
            raise EvaluationFailure(f"Could not render {result.entry}: {error!r}") from error

    def _inline_includes(
        self,
        module: CompiledModule,
        modules: dict[PathType, CompiledModule],
        stack: tuple[PathType, ...],
    ) -> str:
        if module.path in stack:
            raise EvaluationFailure(f"Circular include of {module.path}")
        stack = stack + (module.path,)

        def replace(match) -> str:
            path = resolve_reference(module.path, match.group("path"))
            if path not in modules:
                raise EvaluationFailure(f"Included template {path} was not compiled")
            return self._inline_includes(modules[path], modules, stack)

        return INCLUDE_PATTERN.sub(replace, module.content)
