"""File-set models shared by the catalog, resolver and tree generator."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Tuple

from df_sol.models.options import Language, TemplateKind, TestFramework


class EntryType(str, Enum):
    """What a catalog entry materializes as."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class AssetEntry:
    """One bundled template file or directory.

    ``path`` is a POSIX relative path that may itself contain placeholders.
    """
    path: str
    content: bytes = b""
    substitutable: bool = True
    entry_type: EntryType = EntryType.FILE
    source: str = ""

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY


@dataclass(frozen=True)
class PlanEntry:
    """A catalog entry bound to its final relative destination."""
    destination: str
    asset: AssetEntry

    @property
    def is_dir(self) -> bool:
        return self.asset.is_dir


@dataclass(frozen=True)
class GenerationPlan:
    """Ordered, immutable list of what to write for one invocation."""
    kind: TemplateKind
    test_framework: TestFramework
    entries: Tuple[PlanEntry, ...]
    language: Language = Language.TYPESCRIPT

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def destinations(self) -> List[str]:
        return [entry.destination for entry in self.entries]

    @property
    def files(self) -> List[PlanEntry]:
        return [entry for entry in self.entries if not entry.is_dir]


@dataclass
class GeneratedSummary:
    """Paths touched by one generation run, in write order."""
    root: Path
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    overwritten: List[Path] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)

    def relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()
