"""Research answers service: answer validation and vote summaries."""

__version__ = "0.1.0"
