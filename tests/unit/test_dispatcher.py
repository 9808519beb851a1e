"""Unit tests for the error dispatcher."""

from types import MappingProxyType

import pytest
from structlog.testing import capture_logs

from articleflow.models import FailureKind, StageError, StoreError
from articleflow.services.dispatcher import ERROR_HANDLERS, UNKNOWN_APPROACH, dispatch


class TestDispatch:
    """Tests for dispatch()."""

    @pytest.mark.parametrize(("kind", "cause", "event"), [
        (FailureKind.STORE_CONNECTION, StoreError("no db"), "DB CONNECTION ERROR"),
        (FailureKind.STORE_CREATE, StoreError("no save"), "DB CREATE ARTICLE ERROR"),
        (FailureKind.FILE_SYSTEM, FileNotFoundError("no file"), "FILE SYSTEM ERROR"),
    ])
    def test_dispatches_by_kind(self, kind: FailureKind, cause: Exception, event: str) -> None:
        """Should log one line from the handler registered for the kind."""
        with capture_logs() as logs:
            result = dispatch(StageError(kind, cause), "PROMISES")

        assert result is None
        assert len(logs) == 1
        assert logs[0]["event"] == event
        assert logs[0]["log_level"] == "error"
        assert logs[0]["approach"] == "PROMISES"
        assert logs[0]["error"] == str(cause)

    def test_db_connection_error_line(self) -> None:
        with capture_logs() as logs:
            dispatch(
                StageError(FailureKind.STORE_CONNECTION, StoreError("an error occurred connecting to db")),
                "ASYNC / AWAIT",
            )

        assert logs[0]["event"] == "DB CONNECTION ERROR"
        assert logs[0]["error"] == "an error occurred connecting to db"

    def test_untagged_failure_is_unidentified(self) -> None:
        """An exception without a kind should produce the generic line."""
        with capture_logs() as logs:
            dispatch(ValueError("mystery"), "PROMISES")

        assert len(logs) == 1
        assert logs[0]["event"] == "UNIDENTIFIED ERROR"
        assert "mystery" in logs[0]["error"]

    def test_kind_without_handler_is_unidentified(self) -> None:
        """A kind missing from the handler table should produce the generic line."""
        failure = StageError(FailureKind.FILE_SYSTEM, OSError("disk"))

        with capture_logs() as logs:
            dispatch(failure, "PROMISES", handlers=MappingProxyType({}))

        assert [entry["event"] for entry in logs] == ["UNIDENTIFIED ERROR"]

    def test_unhashable_kind_is_unidentified(self) -> None:
        """A kind that cannot be looked up should not escape as an error."""

        class OddFailure(Exception):
            kind = ["store_connection"]

        with capture_logs() as logs:
            result = dispatch(OddFailure("boom"), "PROMISES")

        assert result is None
        assert [entry["event"] for entry in logs] == ["UNIDENTIFIED ERROR"]

    def test_default_approach_label(self) -> None:
        with capture_logs() as logs:
            dispatch(StageError(FailureKind.STORE_CREATE, StoreError("x")))

        assert logs[0]["approach"] == UNKNOWN_APPROACH

    def test_handler_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ERROR_HANDLERS[FailureKind.FILE_SYSTEM] = lambda cause, approach: None  # type: ignore[index]
        assert set(ERROR_HANDLERS) == set(FailureKind)
