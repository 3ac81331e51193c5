"""Tests for the file and directory linter."""

from pathlib import Path

from untranslated import MESSAGE
from untranslated.analyzers import (
    collect_files,
    lint_directory,
    lint_file,
    lint_paths,
    lint_source,
    lint_tree,
)
from untranslated.analyzers.parser import parse_source
from untranslated.analyzers.types import NullTypeQuery
from untranslated.analyzers.whitelist import Whitelist
from untranslated.models import LintOptions


class TestLintSource:
    """Tests for lint_source diagnostics."""

    def test_diagnostic_fields(self) -> None:
        (diagnostic,) = lint_source('const a = "Hello world";', "typescript", file="a.ts")

        assert diagnostic.file == "a.ts"
        assert diagnostic.line == 1
        assert diagnostic.column == 11
        assert diagnostic.end_line == 1
        assert diagnostic.end_column == 24
        assert diagnostic.kind == "string"
        assert diagnostic.text == "Hello world"
        assert diagnostic.message == MESSAGE

    def test_format(self) -> None:
        (diagnostic,) = lint_source('const a = "Hello world";', "typescript", file="a.ts")
        assert diagnostic.format() == 'a.ts:1:11: disallow literal string "Hello world"'

    def test_kinds(self) -> None:
        source = 'const a = "Hello world";\nconst b = `Good ${x} day`;\nconst c = <p>Sign in</p>;\n'
        kinds = [d.kind for d in lint_source(source)]
        assert kinds == ["string", "template", "text"]

    def test_sorted_by_position(self) -> None:
        source = '<div title="First title">\n  Second text\n  <b>Third text</b>\n</div>;'
        diagnostics = lint_source(source)
        assert [d.text for d in diagnostics] == ["First title", "Second text", "Third text"]

    def test_idempotent(self) -> None:
        source = 'const a = "Hello world";\nconst el = <p>{"Sign in"}</p>;'
        tree = parse_source(source, "tsx")
        whitelist = Whitelist.from_options()

        first = lint_tree(tree, whitelist, NullTypeQuery())
        second = lint_tree(tree, whitelist, NullTypeQuery())
        assert first == second
        assert [d.text for d in first] == ["Hello world", "Sign in"]


class TestLintFile:
    """Tests for lint_file."""

    def test_sample_component(self, sample_component_file: Path) -> None:
        result = lint_file(sample_component_file, base_dir=sample_component_file.parent)

        assert "error" not in result
        assert [d.text for d in result["diagnostics"]] == ["Please sign in", "Hello , nice to see you"]
        assert all(d.file == "Greeting.tsx" for d in result["diagnostics"])

    def test_syntax_error(self, temp_dir: Path) -> None:
        filepath = temp_dir / "broken.ts"
        filepath.write_text('const = "Hello world" +;\n')

        result = lint_file(filepath, base_dir=temp_dir)
        assert result == {"error": "Syntax error", "file": "broken.ts"}

    def test_unsupported_extension(self, temp_dir: Path) -> None:
        filepath = temp_dir / "notes.md"
        filepath.write_text("Hello world")

        result = lint_file(filepath)
        assert "error" in result

    def test_missing_file(self, temp_dir: Path) -> None:
        result = lint_file(temp_dir / "missing.ts")
        assert "error" in result

    def test_options_are_applied(self, temp_dir: Path) -> None:
        filepath = temp_dir / "log.js"
        filepath.write_text('logger.info("Server started");\n')

        assert len(lint_file(filepath)["diagnostics"]) == 1
        options = LintOptions(ignoreFunction=["logger.info"])
        assert lint_file(filepath, options=options)["diagnostics"] == []


class TestLintDirectory:
    """Tests for directory scans."""

    def _make_project(self, root: Path) -> None:
        (root / "src").mkdir()
        (root / "src" / "App.jsx").write_text("export const App = () => <h1>Welcome home</h1>;\n")
        (root / "src" / "api.d.ts").write_text('export declare const label: string;\n')
        (root / "node_modules" / "lib").mkdir(parents=True)
        (root / "node_modules" / "lib" / "index.js").write_text('alert("Hello world");\n')
        (root / "generated").mkdir()
        (root / "generated" / "strings.ts").write_text('export const a = "Hello world";\n')
        (root / ".untranslatedignore").write_text("generated\n")
        (root / "README.md").write_text("Hello world\n")

    def test_collect_files(self, temp_dir: Path) -> None:
        self._make_project(temp_dir)
        files = collect_files(temp_dir)
        assert [f.relative_to(temp_dir).as_posix() for f in files] == ["src/App.jsx"]

    def test_report(self, temp_dir: Path, sample_component_file: Path) -> None:
        self._make_project(temp_dir)
        report = lint_directory(temp_dir)

        assert report.file_count == 2
        assert report.errors == []
        assert [(d.file, d.text) for d in report.diagnostics] == [
            ("Greeting.tsx", "Please sign in"),
            ("Greeting.tsx", "Hello , nice to see you"),
            (str(Path("src") / "App.jsx"), "Welcome home"),
        ]
        assert report.metadata.analyzer == "untranslated"
        assert report.metadata.total_diagnostics == 3
        assert report.metadata.source_directory == str(temp_dir.resolve())
        assert report.metadata.elapsed_ms > 0

    def test_syntax_errors_are_collected(self, temp_dir: Path) -> None:
        (temp_dir / "bad.ts").write_text("function (\n")
        (temp_dir / "good.ts").write_text('export const a = "Hello world";\n')

        report = lint_directory(temp_dir)
        assert report.file_count == 2
        assert [e["file"] for e in report.errors] == ["bad.ts"]
        assert [d.text for d in report.diagnostics] == ["Hello world"]


class TestLintPaths:
    """Tests for mixed file and directory arguments."""

    def test_files_and_directories(self, temp_dir: Path, sample_component_file: Path) -> None:
        other = temp_dir / "nested"
        other.mkdir()
        (other / "a.ts").write_text('export const a = "Hello world";\n')

        report = lint_paths([sample_component_file, other])
        assert report.file_count == 2
        assert len(report.diagnostics) == 3
        assert report.metadata.total_diagnostics == 3
        assert report.metadata.elapsed_ms > 0
