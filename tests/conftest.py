"""Shared test fixtures for Snippet Insight tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures" / "snippets"


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="also run tests marked slow (large generated inputs)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: analyzes large generated snippets")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip = pytest.mark.skip(reason="slow; pass --run-slow to include")
    for item in items:
        if item.get_closest_marker("slow"):
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user/project config files and SNIPPET_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in (
        "SNIPPET_DEFAULT_LANGUAGE",
        "SNIPPET_LANGUAGE",
        "SNIPPET_MAX_ERRORS",
        "SNIPPET_NATIVE_PARSE",
        "SNIPPET_VERBOSITY",
    ):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def snippets_dir():
    return FIXTURES


@pytest.fixture
def js_snippet():
    """Small JavaScript function with a loop and a branch."""
    return (FIXTURES / "sum_even.js").read_text(encoding="utf-8")


@pytest.fixture
def python_snippet():
    """Recursive Python function."""
    return (FIXTURES / "factorial.py").read_text(encoding="utf-8")


@pytest.fixture
def html_snippet():
    """Well-formed HTML fragment."""
    return (FIXTURES / "card.html").read_text(encoding="utf-8")


@pytest.fixture
def cpp_snippet():
    """C++ program with a nested loop."""
    return (FIXTURES / "matrix.cpp").read_text(encoding="utf-8")
