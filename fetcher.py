# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Tuple

log = logging.getLogger('Fetcher')


def fetch_sources(sm, toc_url: str, wordcount_url: str, concurrent: bool = True) -> Tuple[str, Any]:
    """
    Загружает HTML оглавления и JSON с количеством слов.
    Возвращает (html, payload) только когда оба запроса успешны; первая ошибка пробрасывается.
    """
    log.info('GET TOC: %s', toc_url)
    log.info('GET WORDCOUNT: %s', wordcount_url)
    if not concurrent:
        html = sm.get_text(toc_url)
        payload = sm.get_json(wordcount_url)
    else:
        with ThreadPoolExecutor(max_workers=2) as ex:
            toc_fut = ex.submit(sm.get_text, toc_url)
            wc_fut = ex.submit(sm.get_json, wordcount_url)
            html = toc_fut.result()
            payload = wc_fut.result()
    log.info('TOC: HTML length=%d', len(html))
    return html, payload
