"""Timer-based mock article store."""

import asyncio
import dataclasses
from collections.abc import Callable

from articleflow.config import Settings
from articleflow.models import Article, StoreError
from articleflow.utils.logging import get_logger

logger = get_logger(__name__)

FAILURE_URL = "error"
MOCK_ARTICLE_ID = "faw0e9fu0293rj03f934f039j4fj"

ConnectCallback = Callable[[StoreError | None], None]
CreateCallback = Callable[[StoreError | None, Article | None], None]


class MockDB:
    """Simulates a remote article store with fixed latencies.

    Both operations follow the callback convention ``callback(err, result)``
    and complete on the running event loop after their delay. Nothing is
    persisted between calls.
    """

    def __init__(
        self,
        connect_delay: float = 1.0,
        create_delay: float = 2.0,
        fail_create: bool = False,
    ) -> None:
        self._connect_delay = connect_delay
        self._create_delay = create_delay
        self._fail_create = fail_create

    @classmethod
    def from_settings(cls, settings: Settings, fail_create: bool = False) -> "MockDB":
        """Create a store using the configured delays."""
        return cls(
            connect_delay=settings.connect_delay,
            create_delay=settings.create_delay,
            fail_create=fail_create,
        )

    def connect(self, url: str, callback: ConnectCallback) -> asyncio.TimerHandle:
        """Connect to the store.

        Args:
            url: Store URL. The sentinel ``"error"`` makes the connection fail.
            callback: Called with ``None`` on success or a StoreError.

        Returns:
            The timer handle of the pending completion.
        """
        logger.debug("Scheduling connect", url=url, delay=self._connect_delay)
        loop = asyncio.get_running_loop()
        return loop.call_later(self._connect_delay, self._finish_connect, url, callback)

    def create(
        self,
        article: Article,
        callback: CreateCallback,
        fail: bool | None = None,
    ) -> asyncio.TimerHandle:
        """Save an article.

        Args:
            article: The fully populated record to save.
            callback: Called with ``(None, saved)`` or ``(StoreError, None)``.
            fail: Force a failure for this call. Defaults to the store-wide flag.

        Returns:
            The timer handle of the pending completion.
        """
        should_fail = self._fail_create if fail is None else fail
        logger.debug(
            "Scheduling create",
            source_file_name=article.source_file_name,
            delay=self._create_delay,
        )
        loop = asyncio.get_running_loop()
        return loop.call_later(
            self._create_delay, self._finish_create, article, callback, should_fail
        )

    @staticmethod
    def _finish_connect(url: str, callback: ConnectCallback) -> None:
        if url == FAILURE_URL:
            callback(StoreError("an error occurred connecting to db"))
            return
        callback(None)

    @staticmethod
    def _finish_create(article: Article, callback: CreateCallback, fail: bool) -> None:
        if fail:
            callback(StoreError("an error occurred saving data"), None)
            return
        callback(None, dataclasses.replace(article, generated_id=MOCK_ARTICLE_ID))
