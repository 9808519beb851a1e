"""Nested callbacks.

Drawbacks:
    1. Hard to read: every step is nested inside the previous one.
    2. Error handling is repeated in each callback.
    3. Connecting and reading the file are independent, yet run one after the other.
"""

import asyncio

from articleflow.approaches.base import LAUNCHED, Workflow
from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings
from articleflow.models import Article, StoreError
from articleflow.services.stages import draft_article
from articleflow.utils.logging import get_logger

APPROACH_NAME = "CALLBACKS"

logger = get_logger(__name__)


async def callbacks(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article with callbacks nested inside each other.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    log = logger.bind(approach=APPROACH_NAME)
    finished: asyncio.Future[Article | None] = asyncio.get_running_loop().create_future()

    # We must connect to the DB before saving a new article in it
    def on_connect(err: StoreError | None) -> None:
        if err is not None:
            log.error("db connection error", error=err.reason)
            finished.set_result(None)
            return
        log.info("Connected to DB")

        # Before creating the article we need its content
        def on_read(err: Exception | None, html: str | None) -> None:
            if err is not None:
                log.error("readfile error", error=str(err))
                finished.set_result(None)
                return
            log.info("Got article from file system")

            # Connected AND holding the content: save the record
            def on_create(err: StoreError | None, article: Article | None) -> None:
                if err is not None or article is None:
                    log.error("db create error", error=str(err))
                    finished.set_result(None)
                    return
                log.info("Created article in db", article_id=article.generated_id)
                finished.set_result(article)

            wf.store.create(draft_article(wf.settings, html or ""), on_create)

        wf.source.read_article(on_read)

    wf.store.connect(wf.settings.db_url, on_connect)
    log.info(LAUNCHED)
    return await finished
