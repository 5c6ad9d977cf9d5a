from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

PathPart = Union[str, int]


def json_pointer(parts: Sequence[PathPart]) -> str:
    """RFC 6901 pointer for a path; the root is the empty string."""
    return "".join("/" + str(p).replace("~", "~0").replace("/", "~1") for p in parts)


@dataclass(frozen=True)
class Violation:
    """One way a candidate document fails to conform to the schema."""
    path: str          # JSON pointer into the document
    keyword: str       # schema keyword that failed, e.g. "required"
    schema_path: str   # JSON pointer into the schema
    message: str

    def describe(self) -> str:
        return f"data{self.path}: {self.message}"


@dataclass(frozen=True)
class FileResult:
    """Outcome for a single candidate document."""
    path: str
    violations: Tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations


@dataclass
class RunReport:
    """
    Aggregate of one validation run.

    `files` keeps discovery order. `exit_code` is 0 when every discovered file
    is valid (or nothing was discovered) and 1 when any file failed.
    """
    files: List[FileResult] = field(default_factory=list)
    exit_code: int = 0

    @property
    def failures(self) -> int:
        return sum(1 for r in self.files if not r.valid)
