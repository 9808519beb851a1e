"""Local markdown article source."""

import asyncio
from collections.abc import Callable
from pathlib import Path

import markdown as md_lib

from articleflow.utils.logging import get_logger

logger = get_logger(__name__)

ReadCallback = Callable[[Exception | None, str | None], None]


class ArticleSource:
    """Reads the fixed markdown document and renders it to HTML."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        """Read the raw markdown text.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        return self._path.read_text(encoding="utf-8")

    @staticmethod
    def render(text: str) -> str:
        """Convert markdown text to an HTML fragment."""
        return md_lib.markdown(text)

    def read_article(self, callback: ReadCallback) -> None:
        """Read and render the document without blocking the event loop.

        The callback runs on the event loop with ``(None, html)`` on success
        or ``(error, None)`` when the file cannot be read, decoded or rendered.
        """
        logger.debug("Reading markdown file", path=str(self._path))
        loop = asyncio.get_running_loop()
        pending = loop.run_in_executor(None, self.read)

        def _on_read(done: asyncio.Future[str]) -> None:
            try:
                text = done.result()
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Markdown read failed", path=str(self._path), error=str(e))
                callback(e, None)
                return
            except Exception as e:
                logger.warning("Markdown read failed unexpectedly", path=str(self._path), error=str(e))
                callback(e, None)
                return

            try:
                html = self.render(text)
            except Exception as e:
                logger.warning("Markdown render failed", path=str(self._path), error=str(e))
                callback(e, None)
                return
            callback(None, html)

        pending.add_done_callback(_on_read)
