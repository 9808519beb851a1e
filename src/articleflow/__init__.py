"""articleflow: one workflow, six ways of composing asynchronous work."""

__version__ = "0.1.0"
