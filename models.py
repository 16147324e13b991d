# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional


class Layout(enum.Enum):
    HIERARCHICAL = 'hierarchical'
    TABULAR = 'tabular'


@dataclass(frozen=True)
class ChapterRecord:
    volume_index: int
    book_index: int
    web_serial: Optional[str] = None
    audiobook: Optional[str] = None
    ebook: Optional[str] = None

    def __post_init__(self):
        if self.web_serial is None and self.audiobook is None and self.ebook is None:
            raise ValueError('ChapterRecord requires at least one title')

    def to_dict(self) -> Dict:
        return {
            'v': self.volume_index,
            'b': self.book_index,
            'ws': self.web_serial,
            'ab': self.audiobook,
            'eb': self.ebook,
        }


@dataclass(frozen=True)
class EntryDiagnostic:
    # where: человекочитаемый адрес записи, например "volume 2 / row 5"
    where: str
    reason: str


@dataclass
class WalkResult:
    chapters: List[ChapterRecord] = field(default_factory=list)
    diagnostics: List[EntryDiagnostic] = field(default_factory=list)

    def merge(self, other: 'WalkResult') -> None:
        self.chapters.extend(other.chapters)
        self.diagnostics.extend(other.diagnostics)


class NameIndex:
    """Упорядоченный список уникальных имён. Первое появление имени фиксирует его индекс."""

    def __init__(self):
        self.names: List[str] = []
        self._index: Dict[str, int] = {}

    def register(self, name: str) -> int:
        if name not in self._index:
            self._index[name] = len(self.names)
            self.names.append(name)
        return self._index[name]

    def __len__(self) -> int:
        return len(self.names)


@dataclass
class TocResult:
    volumes: List[str]
    books: List[str]
    chapters: List[ChapterRecord]
    layout: Optional[Layout] = None
    diagnostics: List[EntryDiagnostic] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'volumes': list(self.volumes),
            'books': list(self.books),
            'chapters': [c.to_dict() for c in self.chapters],
        }
