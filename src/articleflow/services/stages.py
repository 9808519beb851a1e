"""Future-returning wrappers around the three workflow stages."""

import asyncio

from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings
from articleflow.models import Article, FailureKind, StageError, StoreError
from articleflow.utils.logging import get_logger

logger = get_logger(__name__)


def draft_article(settings: Settings, html: str) -> Article:
    """Build the record to save from the rendered article body."""
    return Article(
        source_file_name=settings.blog_path.stem,
        title=settings.article_title,
        body=html,
        tags=list(settings.article_tags),
    )


class ArticleStages:
    """Connect, fetch and persist, each exposed as an ``asyncio.Future``.

    Every future is created unresolved and settled from the component's
    callback, so the work starts as soon as the method is called. Failures
    are rejected as ``StageError`` tagged with the failing stage.
    """

    def __init__(
        self,
        approach: str,
        settings: Settings,
        store: MockDB,
        source: ArticleSource,
    ) -> None:
        self._settings = settings
        self._store = store
        self._source = source
        self._log = logger.bind(approach=approach)

    def connect_to_db(self) -> asyncio.Future[None]:
        """Connect to the store."""
        connected: asyncio.Future[None] = asyncio.get_running_loop().create_future()

        def _on_connect(err: StoreError | None) -> None:
            if err is not None:
                connected.set_exception(StageError(FailureKind.STORE_CONNECTION, err))
                return
            self._log.info("Connected to DB")
            connected.set_result(None)

        self._log.debug("Connecting to DB", db_url=self._settings.db_url)
        self._store.connect(self._settings.db_url, _on_connect)
        return connected

    def get_local_article(self, announce: bool = True) -> asyncio.Future[str]:
        """Read the markdown document and render it to HTML.

        Args:
            announce: Log "Got article from file system" as soon as the read succeeds.
        """
        fetched: asyncio.Future[str] = asyncio.get_running_loop().create_future()

        def _on_read(err: Exception | None, html: str | None) -> None:
            if err is not None:
                fetched.set_exception(StageError(FailureKind.FILE_SYSTEM, err))
                return
            if announce:
                self._log.info("Got article from file system")
            fetched.set_result(html or "")

        self._log.debug("Reading article from file system", path=str(self._source.path))
        self._source.read_article(_on_read)
        return fetched

    def announce_fetched(self) -> None:
        """Report a quiet fetch once the join it belongs to has succeeded."""
        self._log.info("Got article from file system")

    def create_article(self, html: str) -> asyncio.Future[Article]:
        """Save a new article whose body is ``html``."""
        created: asyncio.Future[Article] = asyncio.get_running_loop().create_future()

        def _on_create(err: StoreError | None, article: Article | None) -> None:
            if err is not None or article is None:
                cause = err or StoreError("store returned no record")
                created.set_exception(StageError(FailureKind.STORE_CREATE, cause))
                return
            self._log.info("Created article in db", article_id=article.generated_id)
            created.set_result(article)

        self._log.debug("Creating article in db")
        self._store.create(draft_article(self._settings, html), _on_create)
        return created
