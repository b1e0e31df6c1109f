"""MediaHub listing service: video and comment listings with relevance search."""

__version__ = "0.1.0"
