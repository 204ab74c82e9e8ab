import os
import re
from pathlib import Path
from typing import Iterable

from ..core.mytyping import PathType


INCLUDE_PATTERN = re.compile(r"<!--\s*include:\s*(?P<path>\S+?)\s*-->")
REQUIRE_PATTERN = re.compile(r"""require\(\s*['"](?P<path>[^'"]+)['"]\s*\)""")


def normalize_path(path: str|Path) -> PathType:
    return os.path.normpath(os.path.abspath(path))


def resolve_reference(base_path: PathType, reference: str) -> PathType:
    return normalize_path(Path(base_path).parent / reference)


def find_references(path: PathType, content: str, pattern: re.Pattern) -> Iterable[PathType]:
    for match in pattern.finditer(content):
        yield resolve_reference(path, match.group("path"))
