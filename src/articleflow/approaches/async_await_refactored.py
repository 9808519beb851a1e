"""Async / await with the independent steps gathered.

Same shape as the sequential coroutine, but connecting and reading the file
are awaited together so they run concurrently.
"""

import asyncio

from articleflow.approaches.base import LAUNCHED, Workflow
from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings
from articleflow.models import Article, StageError
from articleflow.services.dispatcher import dispatch
from articleflow.services.stages import ArticleStages
from articleflow.utils.logging import get_logger

APPROACH_NAME = "ASYNC / AWAIT REFACTORED"

logger = get_logger(__name__)


async def _create_better_async_article(stages: ArticleStages) -> Article | None:
    try:
        _, html = await asyncio.gather(
            stages.connect_to_db(),
            stages.get_local_article(announce=False),
        )
        stages.announce_fetched()
        return await stages.create_article(html)
    except StageError as e:
        dispatch(e, APPROACH_NAME)
        return None


async def async_await_refactored(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article after awaiting a concurrent connect and fetch.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    stages = ArticleStages(APPROACH_NAME, wf.settings, wf.store, wf.source)

    task = asyncio.create_task(_create_better_async_article(stages))
    logger.info(LAUNCHED, approach=APPROACH_NAME)
    return await task
