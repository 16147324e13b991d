# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from errors import StructuralParseError
from extractor import walk_container
from models import ChapterRecord, EntryDiagnostic, Layout, NameIndex, TocResult, WalkResult

log = logging.getLogger('TocParser')

CONTAINER_SELECTOR = '#table-of-contents, .table-of-contents, main, body'
VOLUME_SELECTOR = '[id^="vol-"], .volume-wrapper, .volume'
VOLUME_HEADING_SELECTOR = 'h2, h3, .volume-title, [class*="volume-name"]'
BOOK_SELECTOR = '.book-wrapper'
BOOK_TITLE_SELECTOR = '.head-book-title, .book-title'
BOOK_NUM_SELECTOR = '.book-title-num, a'
BOOK_TEXT_SELECTOR = '.book-title-text'

VOLUME_HEADER_RE = re.compile(r'Volume\s+\d+', re.IGNORECASE)
BOOK_HEADER_RE = re.compile(r'Book\s+\d+', re.IGNORECASE)
TABLE_HEADER_ROW_RE = re.compile(r'web\s*serial|audiobook', re.IGNORECASE)


def _text(el: Optional[Tag]) -> str:
    return el.get_text().strip() if el is not None else ''


def find_container(soup: BeautifulSoup) -> Tag:
    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        raise StructuralParseError('Could not find table of contents container in HTML')
    return container


def detect_layout(container: Tag) -> Layout:
    if container.select_one(VOLUME_SELECTOR) is not None:
        return Layout.HIERARCHICAL
    return Layout.TABULAR


def book_name(book_wrapper: Tag, registered: int) -> str:
    """Имя книги: "<номер> -<название>", либо что есть, либо "Book N"."""
    title_el = book_wrapper.select_one(BOOK_TITLE_SELECTOR)
    name = ''
    if title_el is not None:
        num = _text(title_el.select_one(BOOK_NUM_SELECTOR))
        title = _text(title_el.select_one(BOOK_TEXT_SELECTOR))
        if num and title:
            name = f"{num} -{title}"
        else:
            name = num or title
    return name or f"Book {registered + 1}"


def parse_hierarchical(container: Tag) -> TocResult:
    volumes = NameIndex()
    books = NameIndex()
    out = WalkResult()

    wrappers = container.select(VOLUME_SELECTOR)
    log.info('Найдено обёрток томов: %d', len(wrappers))
    for pos, wrapper in enumerate(wrappers):
        try:
            volume_name = _text(wrapper.select_one(VOLUME_HEADING_SELECTOR)) or f"Volume {pos + 1}"
            volume_index = volumes.register(volume_name)

            book_wrappers = wrapper.select(BOOK_SELECTOR)
            if book_wrappers:
                for book_pos, book_wrapper in enumerate(book_wrappers, start=1):
                    try:
                        book_index = books.register(book_name(book_wrapper, len(books)))
                        body = book_wrapper.select_one('.book-body')
                        out.merge(walk_container(body, volume_index, book_index))
                    except Exception as e:
                        where = f"{volume_name} / book {book_pos}"
                        log.warning('SKIP %s: %s', where, e)
                        out.diagnostics.append(EntryDiagnostic(where, str(e)))
            else:
                # том без книг: одна неявная книга с индексом 0
                if not len(books):
                    books.register('Book 1')
                out.merge(walk_container(wrapper, volume_index, 0))

            log.info('Том %d из %d: %s', pos + 1, len(wrappers), volume_name)
        except Exception as e:
            where = f"volume {pos + 1}"
            log.warning('SKIP %s: %s', where, e)
            out.diagnostics.append(EntryDiagnostic(where, str(e)))

    return TocResult(volumes.names, books.names, out.chapters, Layout.HIERARCHICAL, out.diagnostics)


def parse_tabular(container: Tag) -> TocResult:
    table = container.select_one('table')
    if table is None:
        raise StructuralParseError('Could not find table or volume structure in HTML')
    log.info('Найдена табличная структура')

    volumes = NameIndex()
    books = NameIndex()
    chapters = []
    diagnostics = []
    current_volume = -1
    current_book = -1

    for n, row in enumerate(table.find_all('tr'), start=1):
        try:
            header_text = _text(row.find('th'))
            if header_text:
                if VOLUME_HEADER_RE.search(header_text):
                    current_volume = volumes.register(header_text)
                    continue
                if BOOK_HEADER_RE.search(header_text):
                    current_book = books.register(header_text)
                    continue

            cells = row.find_all('td')
            if len(cells) < 3:
                continue
            if current_volume == -1:
                current_volume = volumes.register('Volume 1')
            if current_book == -1:
                current_book = books.register('Book 1')

            ws, ab, eb = (c.get_text().strip() for c in cells[:3])
            if TABLE_HEADER_ROW_RE.search(ws):
                continue
            if not ws and not ab and not eb:
                continue
            chapters.append(ChapterRecord(current_volume, current_book, ws or None, ab or None, eb or None))
        except Exception as e:
            where = f"row {n}"
            log.warning('SKIP %s: %s', where, e)
            diagnostics.append(EntryDiagnostic(where, str(e)))

    return TocResult(volumes.names, books.names, chapters, Layout.TABULAR, diagnostics)


def parse_toc(html: str) -> TocResult:
    """
    Разбирает страницу оглавления в TocResult.
    Поддерживаются две разметки: вложенные div тома/книги и плоская таблица.
    Пустой результат считается ошибкой, а не валидное состояние.
    """
    log.info('Разбор оглавления...')
    if not html or not html.strip():
        raise StructuralParseError('Could not find table of contents container in empty HTML')
    soup = BeautifulSoup(html, 'lxml')
    container = find_container(soup)

    layout = detect_layout(container)
    if layout is Layout.HIERARCHICAL:
        result = parse_hierarchical(container)
    else:
        result = parse_tabular(container)

    if not result.volumes:
        result.volumes.append('Volume 1')
    if not result.books:
        result.books.append('Book 1')
    if not result.chapters:
        raise StructuralParseError('No chapters found in the HTML. Please check the file format.')

    if result.diagnostics:
        log.warning('Пропущено записей: %d', len(result.diagnostics))
    log.info('Найдено: томов=%d, книг=%d, глав=%d',
             len(result.volumes), len(result.books), len(result.chapters))
    return result
