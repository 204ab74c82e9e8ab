from dataclasses import dataclass, field

import pandas as pd

from ..core.mytyping import HashType, PathType


@dataclass(frozen=True)
class ModuleStats:
    path: PathType
    built: bool


@dataclass
class BuildStats:
    name: str
    hash: HashType|None = None
    modules: list[ModuleStats] = field(default_factory=list)
    children: list["BuildStats"] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)
    assets: dict[str, str] = field(default_factory=dict)

    def built_modules(self) -> list[PathType]:
        built = [module.path for module in self.modules if module.built]
        for child in self.children:
            built.extend(child.built_modules())
        return built

    def all_errors(self) -> list[Exception]:
        errors = list(self.errors)
        for child in self.children:
            errors.extend(child.all_errors())
        return errors

    def as_rows(self) -> list[dict]:
        rows = [
            dict(compilation=self.name, path=module.path, built=module.built)
            for module in self.modules
        ]
        for child in self.children:
            rows.extend(child.as_rows())
        return rows

    def modules_df(self) -> pd.DataFrame:
        return pd.DataFrame(self.as_rows(), columns=["compilation", "path", "built"])
