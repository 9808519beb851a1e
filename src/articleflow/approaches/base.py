"""Dependencies shared by every approach."""

from dataclasses import dataclass

from articleflow.clients.content import ArticleSource
from articleflow.clients.store import MockDB
from articleflow.config import Settings, get_settings

LAUNCHED = "Launched create article workflow"


@dataclass(frozen=True)
class Workflow:
    """The settings and components one run of an approach works with."""

    settings: Settings
    store: MockDB
    source: ArticleSource

    @classmethod
    def build(
        cls,
        settings: Settings | None = None,
        store: MockDB | None = None,
        source: ArticleSource | None = None,
    ) -> "Workflow":
        """Fill in whatever the caller did not inject from the settings."""
        if settings is None:
            settings = get_settings()
        return cls(
            settings=settings,
            store=store or MockDB.from_settings(settings),
            source=source or ArticleSource(settings.blog_path),
        )
