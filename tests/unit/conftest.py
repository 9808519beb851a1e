"""Shared fixtures for articleflow tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from articleflow.clients.content import ArticleSource, ReadCallback
from articleflow.clients.store import ConnectCallback, CreateCallback, MockDB
from articleflow.config import Settings
from articleflow.models import Article


class RecordingDB(MockDB):
    """MockDB that records when each operation starts and completes."""

    def __init__(self, events: list[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.events = events

    def connect(self, url: str, callback: ConnectCallback):
        self.events.append("connect_started")

        def _done(err):
            self.events.append("connect_done")
            callback(err)

        return super().connect(url, _done)

    def create(self, article: Article, callback: CreateCallback, fail: bool | None = None):
        self.events.append("create_started")

        def _done(err, saved):
            self.events.append("create_done")
            callback(err, saved)

        return super().create(article, _done, fail)


class RecordingSource(ArticleSource):
    """ArticleSource that records when the read starts and completes."""

    def __init__(self, path: Path, events: list[str]) -> None:
        super().__init__(path)
        self.events = events

    def read_article(self, callback: ReadCallback) -> None:
        self.events.append("fetch_started")

        def _done(err, html):
            self.events.append("fetch_done")
            callback(err, html)

        super().read_article(_done)


@pytest.fixture
def settings() -> Settings:
    """Settings with short store delays."""
    return Settings(connect_delay=0.01, create_delay=0.02)


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def make_store(settings: Settings, events: list[str]) -> Callable[..., RecordingDB]:
    def _make(fail_create: bool = False) -> RecordingDB:
        return RecordingDB(
            events,
            connect_delay=settings.connect_delay,
            create_delay=settings.create_delay,
            fail_create=fail_create,
        )

    return _make


@pytest.fixture
def make_source(settings: Settings, events: list[str]) -> Callable[..., RecordingSource]:
    def _make(path: Path | None = None) -> RecordingSource:
        return RecordingSource(path or settings.blog_path, events)

    return _make
