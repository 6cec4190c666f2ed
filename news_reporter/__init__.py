"""Latest-news web search through the Responses API, with spoken summaries."""

__version__ = "0.1.0"