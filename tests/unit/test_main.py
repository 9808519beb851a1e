"""Unit tests for the command-line entry point and logging setup."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import structlog

from articleflow.approaches import APPROACHES
from articleflow.config import Settings
from articleflow.main import create_parser, main, run
from articleflow.utils.logging import setup_logging


class TestMain:
    """Tests for main()."""

    def test_without_approach_lists_choices(self, capsys: pytest.CaptureFixture[str]) -> None:
        """With no approach selected, nothing runs and the choices are listed."""
        with patch("articleflow.main.run") as mock_run:
            assert main([]) == 0

        mock_run.assert_not_called()
        out = capsys.readouterr().out
        for name in APPROACHES:
            assert name in out

    @patch("articleflow.main.setup_logging")
    @patch("articleflow.main.get_settings")
    @patch("articleflow.main.run")
    def test_runs_selected_approach(
        self, mock_run: MagicMock, mock_get_settings: MagicMock, mock_setup: MagicMock
    ) -> None:
        mock_get_settings.return_value = Settings(log_level="DEBUG", json_logs=True)

        assert main(["promise-all"]) == 0

        mock_run.assert_called_once_with("promise-all")
        mock_setup.assert_called_once_with("DEBUG", json_logs=True)

    @patch("articleflow.main.setup_logging")
    @patch("articleflow.main.run", return_value=None)
    def test_exit_status_is_zero_on_failure(self, mock_run: MagicMock, mock_setup: MagicMock) -> None:
        """A failed workflow is only reported in the log."""
        assert main(["callbacks"]) == 0

    def test_unknown_approach_rejected(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["not-an-approach"])

    def test_run_executes_approach_on_new_loop(self) -> None:
        fake = AsyncMock(return_value="article")
        with patch.dict("articleflow.main.APPROACHES", {"fake": fake}):
            assert run("fake") == "article"
        fake.assert_awaited_once_with()


class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.mark.parametrize(("json_logs", "renderer"), [
        (True, structlog.processors.JSONRenderer),
        (False, structlog.dev.ConsoleRenderer),
    ])
    def test_selects_renderer(self, json_logs: bool, renderer: type) -> None:
        with patch("articleflow.utils.logging.structlog.configure") as mock_configure, patch(
            "articleflow.utils.logging.logging.basicConfig"
        ):
            setup_logging("info", json_logs=json_logs)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], renderer)
