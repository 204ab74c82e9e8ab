from typing import Any

from omegaconf import DictConfig
from pydantic import BaseModel


ConfigType = DictConfig
SubConfigType = DictConfig

PathType = str
HashType = str
RenderedOutput = Any


class CompiledModule(BaseModel, frozen=True):
    path: PathType
    content: str


class ChildCompilationResult(BaseModel, frozen=True):
    name: str
    entry: PathType
    modules: tuple[CompiledModule, ...]
    file_dependencies: tuple[PathType, ...]
    hash: HashType

    @property
    def entry_module(self) -> CompiledModule:
        return self.modules_by_path()[self.entry]

    def modules_by_path(self) -> dict[PathType, CompiledModule]:
        return {module.path: module for module in self.modules}


class CacheConfig(BaseModel, frozen=True):
    caching_enabled: bool = True


class CacheRecord(BaseModel, frozen=True):
    last_hash: HashType|None = None
    last_rendered_output: RenderedOutput = None

    @property
    def is_empty(self) -> bool:
        return self.last_hash is None
