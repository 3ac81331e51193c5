"""Pytest configuration and shared fixtures."""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Node

from untranslated.analyzers import lint_source
from untranslated.models import LintOptions


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reported() -> Callable[..., list[str]]:
    """Lint a snippet and return the reported texts."""

    def _reported(source: str, language: str = "tsx", **options) -> list[str]:
        lint_options = LintOptions(**options) if options else None
        return [d.text for d in lint_source(source, language, lint_options)]

    return _reported


@pytest.fixture
def sample_component_file(temp_dir: Path) -> Path:
    """Create a sample React component with a mix of literals."""
    filepath = temp_dir / "Greeting.tsx"
    filepath.write_text('''
import React from "react";
import { Trans } from "@lingui/macro";

const API_URL = "Not A Sentence";

export function Greeting({ name }: { name: string }) {
    if (name === "Anonymous user") {
        return <p className="Muted Text">Please sign in</p>;
    }
    return (
        <div id="greeting">
            <Trans>Welcome back</Trans>
            <span>{`Hello ${name}, nice to see you`}</span>
        </div>
    );
}
''')
    return filepath


@pytest.fixture
def find_nodes() -> Callable[[Node, str], list[Node]]:
    """Collect all nodes of a type in document order."""

    def _find_nodes(root: Node, node_type: str) -> list[Node]:
        found = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == node_type:
                found.append(node)
            stack.extend(reversed(node.children))
        return found

    return _find_nodes
