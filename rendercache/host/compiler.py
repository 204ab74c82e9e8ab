import logging
from pathlib import Path
import re
from typing import Iterable

import dill
from tqdm import tqdm

from ..core.errors import DependencyReadFailure, RenderCacheError
from ..core.interface import HostInterface, PluginInterface
from ..core.mytyping import (
    ChildCompilationResult,
    CompiledModule,
    ConfigType,
    HashType,
    PathType,
    RenderedOutput,
    SubConfigType,
)
from ..fingerprint.engine import compilation_hash, module_hash
from ..plugin.render import TemplateRenderPlugin
from ..tracking.deps import DependencyTracker
from ..utils.config import iter_sub_configs
from ..utils.references import (
    INCLUDE_PATTERN,
    REQUIRE_PATTERN,
    find_references,
    normalize_path,
)
from .filesystem import FileSystem
from .stats import BuildStats, ModuleStats


logger = logging.getLogger(__name__)

MAIN_COMPILATION = "main"


class BuildHost(HostInterface):
    """
    A minimal build tool that drives template plugins.

    Every call to `run()` is one build cycle: the entry module and everything
    it requires are compiled, then each plugin gets its turn. A module counts
    as built in a cycle when its content differs from the previous cycle of
    the same compilation.
    """
    def __init__(
        self,
        entry: PathType|Path,
        file_system: FileSystem|None = None,
        progress: bool = False,
    ):
        self.entry = normalize_path(entry)
        self.file_system = file_system if file_system is not None else FileSystem()
        self.progress = progress
        self._plugins: dict[str, PluginInterface] = {}
        self._module_hashes: dict[str, dict[PathType, HashType]] = {}
        self._history: list[BuildStats] = []
        self._current_stats: BuildStats|None = None

    @classmethod
    def from_config(cls, config: ConfigType) -> "BuildHost":
        build_config: SubConfigType = config["build"]
        host = cls(
            entry=build_config["entry"],
            progress=build_config.get("progress", False),
        )
        host.add_plugins(
            TemplateRenderPlugin.from_config(sub_config)
            for sub_config in iter_sub_configs(config.get("render"))
        )
        return host

    @property
    def history(self) -> list[BuildStats]:
        return list(self._history)

    @property
    def plugins(self) -> list[PluginInterface]:
        return list(self._plugins.values())

    def add_plugins(self, plugins: Iterable[PluginInterface]) -> None:
        for plugin in plugins:
            self.add_plugin(plugin)

    def add_plugin(self, plugin: PluginInterface) -> None:
        name = plugin.name
        if name in self._plugins:
            raise ValueError(f"Already registered plugin named {name}")
        self._plugins[name] = plugin

    def run(self) -> BuildStats:
        stats = BuildStats(name=MAIN_COMPILATION)
        modules, stats.modules = self._compile_modules(MAIN_COMPILATION, self.entry, REQUIRE_PATTERN)

        self._current_stats = stats
        try:
            for plugin in self._plugins.values():
                try:
                    plugin.run_cycle(self)
                except RenderCacheError as error:
                    logger.warning("%s failed: %s", plugin.name, error)
                    stats.errors.append(error)
        finally:
            self._current_stats = None

        stats.hash = compilation_hash(modules, [child.hash for child in stats.children])
        self._history.append(stats)
        return stats

    def run_child_compilation(self, name: str, entry: PathType) -> ChildCompilationResult:
        if self._current_stats is None:
            raise ValueError("Child compilations can only run during a build cycle")
        entry = normalize_path(entry)

        tracker = DependencyTracker()
        with tracker.tracking_pass():
            modules, module_stats = self._compile_modules(name, entry, INCLUDE_PATTERN, tracker=tracker)

        result = ChildCompilationResult(
            name=name,
            entry=entry,
            modules=tuple(modules),
            file_dependencies=tracker.dependencies,
            hash=compilation_hash(modules),
        )
        self._current_stats.children.append(
            BuildStats(name=name, hash=result.hash, modules=module_stats),
        )
        return result

    def emit_asset(self, filename: str, content: RenderedOutput) -> None:
        if self._current_stats is None:
            raise ValueError("Assets can only be emitted during a build cycle")
        self._current_stats.assets[filename] = content

    def save_stats(self, dill_path: Path|None = None) -> None:
        if dill_path is None:
            dill_path = Path("./data/dill/build_stats.dill")
        dill_path.parent.mkdir(exist_ok=True, parents=True)
        with open(dill_path, 'wb') as fdill:
            dill.dump(self._history, fdill)

    def _compile_modules(
        self,
        name: str,
        entry: PathType,
        pattern: re.Pattern,
        tracker: DependencyTracker|None = None,
    ) -> tuple[list[CompiledModule], list[ModuleStats]]:
        previous = self._module_hashes.get(name, {})
        current: dict[PathType, HashType] = {}
        modules: list[CompiledModule] = []
        module_stats: list[ModuleStats] = []

        pending = [entry]
        with tqdm(desc=f"{name} ", disable=not self.progress) as pbar:
            while pending:
                path = pending.pop(0)
                if path in current:
                    continue
                if tracker is not None:
                    tracker.record(path)
                try:
                    content = self.file_system.read_text(path)
                except OSError as error:
                    raise DependencyReadFailure(f"Could not read {path} while compiling {name}") from error

                module = CompiledModule(path=path, content=content)
                current[path] = module_hash(module)
                modules.append(module)
                module_stats.append(ModuleStats(path=path, built=previous.get(path) != current[path]))
                pending.extend(find_references(path, content, pattern))
                pbar.update()

        self._module_hashes[name] = current
        return modules, module_stats
