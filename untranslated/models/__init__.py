"""Pydantic models shared by the linter, config loader and CLI."""

from untranslated.models.lint import Diagnostic, LintOptions, LintReport, ReportMetadata

__all__ = ["Diagnostic", "LintOptions", "LintReport", "ReportMetadata"]
