# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
from typing import Any, Dict, Optional

log = logging.getLogger('WordCount')


def _as_count(value: Any) -> Optional[int]:
    # bool и float не считаются числом слов; строка из цифр допускается
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return None


def normalize_wordcount(data: Any) -> Dict[str, int]:
    """
    Приводит ответ API к плоскому словарю {название главы: число слов}.
    Принимает список записей {chapter_name, wordcount} (возможно в поле "chapters")
    или уже готовый словарь, его копирует как есть.
    """
    source = data
    if isinstance(data, dict) and data.get('chapters'):
        source = data['chapters']

    counts: Dict[str, int] = {}
    if isinstance(source, list):
        for entry in source:
            if not isinstance(entry, dict):
                continue
            name = entry.get('chapter_name')
            count = entry.get('wordcount')
            if not name or not count:
                continue
            value = _as_count(count)
            if value is None:
                log.warning('Некорректное число слов для %r: %r', name, count)
                continue
            counts[name] = value
    elif isinstance(source, dict):
        counts.update(source)
    else:
        log.warning('Неожиданный формат данных о словах: %s', type(source).__name__)

    log.info('Записей о словах: %d', len(counts))
    return counts


def total_words(counts: Dict[str, Any]) -> int:
    return sum(v for v in counts.values() if isinstance(v, int) and not isinstance(v, bool))
