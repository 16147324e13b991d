# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
import os
from typing import Dict

import yaml

from logging_setup import setup_logging
from session_manager import SessionManager
from fetcher import fetch_sources
from toc_parser import parse_toc
from wordcount import normalize_wordcount, total_words
from storage import save_results

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

TOC_URL = 'https://wanderinginn.com/table-of-contents/?compare=audio,ebook'
WORDCOUNT_URL = 'https://innwords.pallandor.com/components/wordcount?min_chapter=1.00&max_chapter=Latest&format=json'
CHAPTERS_OUTPUT = 'wandering-inn-chapters.json'
WORDCOUNT_OUTPUT = 'wandering-inn-wordcount.json'


def _resolve(base_dir: str, path: str) -> str:
    return path if os.path.isabs(path) else os.path.join(base_dir, path)


def run_update(sm, base_dir: str = BASE_DIR) -> Dict:
    """Загрузка -> разбор -> запись. Возвращает сводку для печати."""
    log = logging.getLogger('CLI')
    sources = sm.config.get('sources', {})
    output = sm.config.get('output', {})
    concurrent = bool(sm.config.get('app', {}).get('concurrent_fetch', True))

    html, payload = fetch_sources(
        sm,
        sources.get('toc_url', TOC_URL),
        sources.get('wordcount_url', WORDCOUNT_URL),
        concurrent=concurrent,
    )

    toc = parse_toc(html)
    counts = normalize_wordcount(payload)

    chapters_path = _resolve(base_dir, output.get('chapters', CHAPTERS_OUTPUT))
    wordcount_path = _resolve(base_dir, output.get('wordcount', WORDCOUNT_OUTPUT))
    log.info('Запись файлов: %s, %s', chapters_path, wordcount_path)
    save_results(toc, counts, chapters_path, wordcount_path)

    return {
        'volumes': len(toc.volumes),
        'books': len(toc.books),
        'chapters': len(toc.chapters),
        'skipped': len(toc.diagnostics),
        'wordcount_entries': len(counts),
        'total_words': total_words(counts),
        'chapters_path': chapters_path,
        'wordcount_path': wordcount_path,
    }


def print_summary(summary: Dict) -> None:
    print("Обновление завершено")
    print(f"  Томов: {summary['volumes']}, книг: {summary['books']}, глав: {summary['chapters']}")
    if summary['skipped']:
        print(f"  Пропущено записей: {summary['skipped']}")
    print(f"  Записей о словах: {summary['wordcount_entries']}")
    print(f"  Всего слов: {summary['total_words']:,}")


def main():
    cfg_path = os.path.join(BASE_DIR, 'config', 'config.yaml')
    log = logging.getLogger('CLI')
    try:
        sm = SessionManager(cfg_path)
    except (OSError, yaml.YAMLError) as e:
        # конфиг не прочитан: пишем лог в каталог по умолчанию
        setup_logging(os.path.join(BASE_DIR, 'logs'))
        log.exception('Не удалось загрузить конфигурацию %s: %s', cfg_path, e)
        return 1

    # Логи
    app_cfg = sm.config.get('app', {})
    setup_logging(_resolve(BASE_DIR, app_cfg.get('log_dir', 'logs')), app_cfg.get('log_level', 'INFO'))

    try:
        summary = run_update(sm, BASE_DIR)
    except Exception as e:
        log.exception('Ошибка обновления данных: %s', e)
        return 1
    print_summary(summary)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
