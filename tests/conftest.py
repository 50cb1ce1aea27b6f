"""Shared test fixtures for the pyglob test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from pyglob.matcher import is_wildcard_match
from pyglob.observability.metrics import MetricsCollector
from pyglob.types import MemoStrategy


# === Matching variants ===

MATCH_VARIANTS = [
    pytest.param((MemoStrategy.SPARSE, False), id="sparse"),
    pytest.param((MemoStrategy.DENSE, False), id="dense"),
    pytest.param((MemoStrategy.SPARSE, True), id="sparse-preprocessed"),
    pytest.param((MemoStrategy.DENSE, True), id="dense-preprocessed"),
]


@pytest.fixture(params=MATCH_VARIANTS)
def match(request: pytest.FixtureRequest) -> Callable[[str, str], bool]:
    """is_wildcard_match bound to each memo layout, with and without preprocessing."""
    memo, preprocess = request.param

    def _match(text: str, pattern: str) -> bool:
        return is_wildcard_match(text, pattern, preprocess=preprocess, memo=memo)

    return _match


# === Fixtures ===


@pytest.fixture
def metrics() -> MetricsCollector:
    """A fresh metrics collector."""
    return MetricsCollector()


@pytest.fixture
def config_yaml(tmp_path: Any) -> str:
    """Write a sample config YAML file and return its path."""
    content = """
matching:
  preprocess: true
  memo: dense
"""
    yaml_file = tmp_path / "pyglob.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
