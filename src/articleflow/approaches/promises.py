"""Futures chained like promises.

Benefits:
    1. Every step is a function named after what it does.
    2. Each step receives the result of the one before it.
    3. No nesting, and errors are handled in one place.
Drawbacks:
    1. Wrapping callbacks in futures is verbose.
    2. Connecting and reading the file still run one after the other.
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

APPROACH_NAME = "PROMISES"

logger = get_logger(__name__)


async def promises(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article through a chain of future continuations.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    stages = ArticleStages(APPROACH_NAME, wf.settings, wf.store, wf.source)

    connected = stages.connect_to_db()
    fetched = then(connected, lambda _: stages.get_local_article())
    created = then(fetched, stages.create_article)
    outcome: asyncio.Future[Article | None] = catch(
        created, partial(dispatch, approach=APPROACH_NAME)
    )

    logger.info(LAUNCHED, approach=APPROACH_NAME)
    return await outcome
