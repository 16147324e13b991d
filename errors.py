# InnTrackerV1 (c) 2025 S1riuSS3301
# Licensed under end-user license agreement (EULA). See LICENSE for details.
# Use permitted only in original, unmodified form for personal/internal, non-commercial purposes.


class InnTrackerError(Exception):
    pass


class FetchError(InnTrackerError):
    """Неуспешный HTTP-ответ, сетевой сбой или нечитаемое тело ответа."""

    def __init__(self, url: str, message: str, status: int | None = None):
        self.url = url
        self.status = status
        super().__init__(f"{message}: {url}" if status is None else f"{message} (HTTP {status}): {url}")


class StructuralParseError(InnTrackerError):
    """Страница оглавления не распознана целиком: нет контейнера, таблицы или глав."""


class EntryParseError(InnTrackerError):
    """Ошибка в отдельной записи/строке; наружу из парсера не выходит."""
