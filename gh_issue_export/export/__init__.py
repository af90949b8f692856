"""Report generation."""

from .exporter import ExportSummary, IssueExporter
from .formatter import format_issue

__all__ = ["ExportSummary", "IssueExporter", "format_issue"]
