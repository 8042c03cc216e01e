"""
Pytest Configuration

Shared fixtures for building throwaway directory trees.
"""
from pathlib import Path
from typing import Dict, Iterable

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relative_path: content} dict"""
    def _make(files: Dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path
    return _make


@pytest.fixture
def scripted_tokens():
    """Build a token factory that returns the given hex strings in order"""
    def _make(tokens: Iterable[str]):
        it = iter(tokens)
        calls = []

        def factory(n: int) -> str:
            calls.append(n)
            return next(it)
        factory.calls = calls
        return factory
    return _make
