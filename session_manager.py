# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
from typing import Any, Dict

import requests
import yaml

from errors import FetchError

log = logging.getLogger('Session')

DEFAULT_TIMEOUT = 30


class SessionManager:
    def __init__(self, config_path: str):
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config: Dict = yaml.safe_load(f) or {}
        self.session = requests.Session()
        headers = self.config.get('network', {}).get('headers', {})
        if headers:
            # Normalize headers keys
            self.session.headers.update({
                k.replace('_', '-').title(): v for k, v in headers.items()
            })
        self.timeout = self.config.get('app', {}).get('request_timeout', DEFAULT_TIMEOUT)

    def get(self, url: str) -> requests.Response:
        # без ретраев: один неудачный запрос прерывает запуск
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, 'Request failed') from e
        log.debug("HTTP %s %s", resp.status_code, url)
        if not resp.ok:
            raise FetchError(url, 'Failed to fetch', resp.status_code)
        return resp

    def get_text(self, url: str) -> str:
        return self.get(url).text

    def get_json(self, url: str) -> Any:
        resp = self.get(url)
        try:
            return resp.json()
        except ValueError as e:
            raise FetchError(url, 'Invalid JSON body') from e
