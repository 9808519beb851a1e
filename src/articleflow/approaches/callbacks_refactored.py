"""Callbacks declared up front as named functions.

Better than nesting: each step reads on its own. Still, the call site says
nothing about what happens inside the callbacks, error handling is spread
over every function, and the independent steps still run in sequence.
"""

import asyncio
from dataclasses import dataclass
from functools import partial
from typing import Any

from articleflow.approaches.base import LAUNCHED, Workflow
from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings
from articleflow.models import Article, StoreError
from articleflow.services.stages import draft_article
from articleflow.utils.logging import get_logger

APPROACH_NAME = "CALLBACKS REFACTORED"

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Run:
    workflow: Workflow
    log: Any
    finished: asyncio.Future


def db_connect_cb(run: _Run, err: StoreError | None) -> None:
    if err is not None:
        run.log.error("db connection error", error=err.reason)
        run.finished.set_result(None)
        return
    run.log.info("Connected to DB")
    run.workflow.source.read_article(partial(read_file_cb, run))


def read_file_cb(run: _Run, err: Exception | None, html: str | None) -> None:
    if err is not None:
        run.log.error("readfile error", error=str(err))
        run.finished.set_result(None)
        return
    run.log.info("Got article from file system")
    article = draft_article(run.workflow.settings, html or "")
    run.workflow.store.create(article, partial(create_article_cb, run))


def create_article_cb(run: _Run, err: StoreError | None, article: Article | None) -> None:
    if err is not None or article is None:
        run.log.error("db create error", error=str(err))
        run.finished.set_result(None)
        return
    run.log.info("Created article in db", article_id=article.generated_id)
    run.finished.set_result(article)


async def callbacks_refactored(
    settings: Settings | None = None,
    store: MockDB | None = None,
    source: ArticleSource | None = None,
) -> Article | None:
    """Create the article by handing named callbacks to each step.

    Returns:
        The created article, or None if any step failed.
    """
    wf = Workflow.build(settings, store, source)
    run = _Run(
        workflow=wf,
        log=logger.bind(approach=APPROACH_NAME),
        finished=asyncio.get_running_loop().create_future(),
    )

    # All callbacks are defined; start the chain
    wf.store.connect(wf.settings.db_url, partial(db_connect_cb, run))
    run.log.info(LAUNCHED)
    return await run.finished
