from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Completion:
    prefix: str
    word: str                 # equals prefix when found is False
    found: bool


@dataclass(frozen=True)
class Suggestions:
    prefix: str
    words: List[str]          # lexicographic, at most top_k
    elapsed_us: int = 0       # lookup time in microseconds


@dataclass
class LoadReport:
    inserted: int = 0         # distinct new words
    duplicates: int = 0       # tokens already present
    skipped: int = 0          # rejected tokens (invalid symbols / empty)
    sources: List[str] = field(default_factory=list)

    @property
    def tokens(self) -> int:
        return self.inserted + self.duplicates + self.skipped

    def merge(self, other: "LoadReport") -> None:
        self.inserted += other.inserted
        self.duplicates += other.duplicates
        self.skipped += other.skipped
        self.sources.extend(other.sources)
