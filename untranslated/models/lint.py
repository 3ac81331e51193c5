"""Data models for lint options, diagnostics and reports."""

import re
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from untranslated import MESSAGE


class LintOptions(BaseModel):
    """User configuration for the missing-translation check.

    Accepts the camelCase keys used in rule configuration files as well as
    snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    ignore: list[str] = Field(
        default_factory=list, description="Extra regex sources; matching text is never reported"
    )
    ignore_function: list[str] = Field(
        default_factory=list,
        alias="ignoreFunction",
        description="Extra callee names; dotted names match obj.method calls",
    )
    ignore_attribute: list[str] = Field(
        default_factory=list,
        alias="ignoreAttribute",
        description="Extra JSX attribute names whose values are never inspected",
    )
    type_aware: bool = Field(
        default=True,
        alias="typeAware",
        description="Consult declared literal types in TypeScript sources",
    )

    @field_validator("ignore")
    @classmethod
    def _check_patterns(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid regex {pattern!r}: {e}") from e
        return patterns

    def merged(
        self,
        ignore: list[str] | tuple[str, ...] = (),
        ignore_function: list[str] | tuple[str, ...] = (),
        ignore_attribute: list[str] | tuple[str, ...] = (),
        type_aware: bool | None = None,
    ) -> "LintOptions":
        """Return a copy with extra entries appended to each list."""
        return LintOptions(
            ignore=[*self.ignore, *ignore],
            ignore_function=[*self.ignore_function, *ignore_function],
            ignore_attribute=[*self.ignore_attribute, *ignore_attribute],
            type_aware=self.type_aware if type_aware is None else type_aware,
        )


class Diagnostic(BaseModel):
    """A literal that should be externalized."""

    file: str = Field(description="Path of the linted file (relative when scanning a directory)")
    line: int = Field(description="1-based start line")
    column: int = Field(description="1-based start column")
    end_line: int = Field(description="1-based end line")
    end_column: int = Field(description="1-based end column")
    kind: Literal["string", "template", "text"] = Field(description="Syntactic kind of the literal")
    text: str = Field(description="Normalized text that was judged")
    message: str = Field(default=MESSAGE)

    def format(self) -> str:
        """Render as ``file:line:column: message "text"``."""
        return f'{self.file}:{self.line}:{self.column}: {self.message} "{self.text}"'


class ReportMetadata(BaseModel):
    """Metadata about a lint run."""

    analyzer: str = Field(default="untranslated")
    version: str = Field(description="Package version")
    generated_at: datetime = Field(default_factory=lambda: datetime.now(tz=None))
    source_directory: str | None = Field(default=None, description="Root that was scanned")
    total_diagnostics: int = Field(default=0)
    elapsed_ms: float = Field(default=0.0, description="Wall-clock time spent linting")


class LintReport(BaseModel):
    """Diagnostics for a set of files."""

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    file_count: int = Field(default=0, description="Number of files linted")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Files that could not be read or parsed"
    )
    metadata: ReportMetadata
