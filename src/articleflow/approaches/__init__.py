"""The six ways of running the create article workflow."""

from articleflow.approaches.async_await import async_await
from articleflow.approaches.async_await_refactored import async_await_refactored
from articleflow.approaches.callbacks import callbacks
from articleflow.approaches.callbacks_refactored import callbacks_refactored
from articleflow.approaches.promise_all import promise_all
from articleflow.approaches.promises import promises

APPROACHES = {
    "callbacks": callbacks,
    "callbacks-refactored": callbacks_refactored,
    "promises": promises,
    "promise-all": promise_all,
    "async-await": async_await,
    "async-await-refactored": async_await_refactored,
}

__all__ = [
    "APPROACHES",
    "async_await",
    "async_await_refactored",
    "callbacks",
    "callbacks_refactored",
    "promise_all",
    "promises",
]
