"""Joining the independent steps with ``asyncio.gather``.

Connecting and reading the file do not depend on each other, so both are
started at once and the article is saved when both have finished.

Things to note:
    - A list of futures says little about what each one is.
    - A single failure fails the whole join.
"""

import asyncio
from functools import partial

from articleflow.approaches.base import LAUNCHED, Workflow
from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings
from articleflow.models import Article
from articleflow.services.dispatcher import dispatch
from articleflow.services.stages import ArticleStages
from articleflow.utils.futures import catch, then
from articleflow.utils.logging import get_logger

APPROACH_NAME = "PROMISE.ALL"

logger = get_logger(__name__)


async def promise_all(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article after a joined connect and fetch.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    stages = ArticleStages(APPROACH_NAME, wf.settings, wf.store, wf.source)

    def create_from_results(results: list) -> asyncio.Future[Article]:
        stages.announce_fetched()
        return stages.create_article(results[1])

    joined = asyncio.gather(
        stages.connect_to_db(),
        stages.get_local_article(announce=False),
    )
    created = then(joined, create_from_results)
    outcome: asyncio.Future[Article | None] = catch(
        created, partial(dispatch, approach=APPROACH_NAME)
    )

    logger.info(LAUNCHED, approach=APPROACH_NAME)
    return await outcome
