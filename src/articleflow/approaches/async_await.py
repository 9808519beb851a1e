"""Sequential async / await.

The whole workflow reads top to bottom inside one coroutine and a single
``try`` handles every failure. Each ``await`` suspends only this coroutine;
the caller keeps running until it awaits the result. Connecting and reading
the file still run one after the other.
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

APPROACH_NAME = "ASYNC / AWAIT"

logger = get_logger(__name__)


async def _create_async_article(stages: ArticleStages) -> Article | None:
    try:
        await stages.connect_to_db()
        html = await stages.get_local_article()
        return await stages.create_article(html)
    except StageError as e:
        dispatch(e, APPROACH_NAME)
        return None


async def async_await(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article by awaiting each step in turn.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    stages = ArticleStages(APPROACH_NAME, wf.settings, wf.store, wf.source)

    task = asyncio.create_task(_create_async_article(stages))
    logger.info(LAUNCHED, approach=APPROACH_NAME)
    return await task
