# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
import re
from typing import List, Optional

from bs4 import Comment, NavigableString, Tag

from errors import EntryParseError
from models import ChapterRecord, EntryDiagnostic, WalkResult

log = logging.getLogger('Extractor')

WEB_SERIAL_HEADER_RE = re.compile(r'web\s*serial', re.IGNORECASE)

COLUMN_WEB = '.body-web'
COLUMN_AUDIOBOOK = '.body-audiobook'
COLUMN_EBOOK = '.body-ebook'


def extract_texts(cell: Optional[Tag]) -> List[Optional[str]]:
    """
    Разбивает содержимое ячейки по <br> и возвращает список очищенных строк.
    Пустая или отсутствующая ячейка даёт [None]: слот всё равно учитывается при выравнивании колонок.
    <br> внутри вложенного тега не поддерживается и даёт EntryParseError.
    """
    if cell is None:
        return [None]
    try:
        if not cell.get_text(strip=True):
            return [None]
        for br in cell.find_all('br'):
            if br.parent is not cell:
                raise EntryParseError(f"<br> nested inside <{br.parent.name}>")

        pieces: List[List[str]] = [[]]
        for child in cell.children:
            if isinstance(child, Tag):
                if child.name == 'br':
                    pieces.append([])
                else:
                    pieces[-1].append(child.get_text())
            elif isinstance(child, NavigableString) and not isinstance(child, Comment):
                pieces[-1].append(str(child))

        texts = [t for t in (''.join(p).strip() for p in pieces) if t]
        return texts or [None]
    except EntryParseError:
        raise
    except Exception as e:
        log.warning('Не удалось разобрать текст ячейки: %s', e)
        return [None]


def _at(values: List[Optional[str]], i: int) -> Optional[str]:
    return values[i] if i < len(values) else None


def extract_entry(entry: Tag, volume_index: int, book_index: int) -> List[ChapterRecord]:
    """
    Одна .chapter-entry -> ноль или больше записей.
    Web serial является якорем: берётся только первое значение, а главы аудиокниги/ebook
    раскладываются по отдельным записям с тем же web serial.
    """
    ws_texts = extract_texts(entry.select_one(COLUMN_WEB))
    ab_texts = extract_texts(entry.select_one(COLUMN_AUDIOBOOK))
    eb_texts = extract_texts(entry.select_one(COLUMN_EBOOK))

    ws = ws_texts[0]
    total = max(len(ws_texts), len(ab_texts), len(eb_texts))
    records: List[ChapterRecord] = []
    for i in range(total):
        ab = _at(ab_texts, i)
        eb = _at(eb_texts, i)
        if ws is None and ab is None and eb is None:
            continue
        records.append(ChapterRecord(volume_index, book_index, ws, ab, eb))
    return records


def _row_record(cells: List[Tag], volume_index: int, book_index: int) -> Optional[ChapterRecord]:
    ws, ab, eb = (c.get_text().strip() for c in cells[:3])
    if not ws and not ab and not eb:
        return None
    if WEB_SERIAL_HEADER_RE.search(ws):
        return None
    return ChapterRecord(volume_index, book_index, ws or None, ab or None, eb or None)


def walk_container(container: Optional[Tag], volume_index: int, book_index: int) -> WalkResult:
    """Собирает главы из контейнера тома/книги: .chapter-entry, иначе строки таблицы."""
    result = WalkResult()
    if container is None:
        return result

    entries = container.select('.chapter-entry')
    if entries:
        for n, entry in enumerate(entries, start=1):
            try:
                result.chapters.extend(extract_entry(entry, volume_index, book_index))
            except Exception as e:
                where = f"v{volume_index}/b{book_index} entry {n}"
                log.warning('SKIP %s: %s', where, e)
                result.diagnostics.append(EntryDiagnostic(where, str(e)))
        return result

    # запасной вариант: табличная разметка внутри контейнера
    for n, row in enumerate(container.find_all('tr'), start=1):
        try:
            cells = row.find_all('td')
            if len(cells) < 3:
                continue
            record = _row_record(cells, volume_index, book_index)
            if record is not None:
                result.chapters.append(record)
        except Exception as e:
            where = f"v{volume_index}/b{book_index} row {n}"
            log.warning('SKIP %s: %s', where, e)
            result.diagnostics.append(EntryDiagnostic(where, str(e)))
    return result
