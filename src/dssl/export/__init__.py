"""Output formatters and chart geometry."""

from dssl.export.formatters import JSONFormatter, MarkdownFormatter, TableFormatter

__all__ = ["TableFormatter", "JSONFormatter", "MarkdownFormatter"]
