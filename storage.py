# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import json
import logging
import os
import tempfile
from typing import Dict, List, Optional, Tuple

from models import TocResult

log = logging.getLogger('Storage')


def _dump(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def save_results(toc: TocResult, counts: Dict[str, int], chapters_path: str, wordcount_path: str) -> None:
    """
    Записывает оба JSON-файла: либо оба, либо ни одного.
    Сначала сериализуем и пишем во временные файлы рядом с целевыми, затем переименовываем.
    """
    payloads = [(chapters_path, _dump(toc.to_dict())), (wordcount_path, _dump(counts))]

    staged: List[Tuple[str, str]] = []
    try:
        for path, text in payloads:
            target_dir = os.path.dirname(os.path.abspath(path))
            os.makedirs(target_dir, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix='.tmp-', suffix='.json', dir=target_dir)
            staged.append((tmp, path))
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(text)
    except Exception:
        for tmp, _ in staged:
            try:
                os.remove(tmp)
            except OSError as e:
                log.warning("Не удалось удалить временный файл %s: %s", tmp, e)
        raise

    _commit(staged)


def _commit(staged: List[Tuple[str, str]]) -> None:
    """
    Переименовывает временные файлы в целевые.
    Прежние версии сначала уходят в .bak; при сбое всё возвращается как было.
    """
    done: List[Tuple[str, str, Optional[str]]] = []
    try:
        for tmp, path in staged:
            bak = None
            if os.path.isfile(path):
                bak = path + '.bak'
                os.replace(path, bak)
            done.append((tmp, path, bak))
            os.replace(tmp, path)
    except Exception:
        _rollback(staged, done)
        raise

    for _, path, bak in done:
        log.info("SAVED %s", path)
        if bak:
            try:
                os.remove(bak)
            except OSError as e:
                log.warning("Не удалось удалить резервную копию %s: %s", bak, e)


def _rollback(staged: List[Tuple[str, str]], done: List[Tuple[str, str, Optional[str]]]) -> None:
    for tmp, path, bak in reversed(done):
        try:
            if not os.path.exists(tmp) and os.path.isfile(path):
                # новый файл уже на месте, убираем его
                os.remove(path)
            if bak:
                os.replace(bak, path)
        except OSError as e:
            log.error("Не удалось восстановить %s: %s", path, e)
    for tmp, _ in staged:
        if os.path.exists(tmp):
            try:
                os.remove(tmp)
            except OSError as e:
                log.warning("Не удалось удалить временный файл %s: %s", tmp, e)


def load_results(chapters_path: str, wordcount_path: str) -> Tuple[Dict, Dict[str, int]]:
    with open(chapters_path, 'r', encoding='utf-8') as f:
        chapters = json.load(f)
    with open(wordcount_path, 'r', encoding='utf-8') as f:
        counts = json.load(f)
    return chapters, counts
