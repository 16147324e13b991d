# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.
import logging
import os
import sys
from datetime import datetime

QUIET_LOGGERS = ('urllib3', 'charset_normalizer')


def setup_logging(log_dir: str, level: str = "INFO") -> str:
    """Файл update-<время>.log на каждый запуск плюс прогресс в stdout."""
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, datetime.now().strftime("update-%Y%m%d-%H%M%S.log"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_path, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )
    # requests/urllib3 на DEBUG пишут каждое соединение
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("logging_setup").info("Лог обновления: %s", log_path)
    return log_path
