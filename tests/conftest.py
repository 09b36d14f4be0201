"""
Pytest configuration for the gorun test suite.

This conftest.py provides:
- Quiet logging (no console sink)
- Paths to the Go fixtures in tests/testdata
- A throwaway go module for orchestration tests
"""

import os
from pathlib import Path

import pytest

from gorun.logging_config import setup_logging


TESTDATA = Path(__file__).parent / "testdata"



# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep the console quiet and ignore user config files."""
    os.environ.setdefault("GORUN_QUIET", "1")
    config.addinivalue_line("markers", "go: tests that invoke the go toolchain")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    No console sink; tests assert on captured output only.
    """
    setup_logging(level="DEBUG", quiet=True, enable_file_logging=False, force=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Point config discovery away from the developer's own files."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GORUN_CONFIG", raising=False)
    monkeypatch.delenv("GORUN_GO", raising=False)
    monkeypatch.delenv("GORUN_SUPPRESS_PREFIX", raising=False)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def go_module(tmp_path, monkeypatch) -> Path:
    """
    A go module with one package, with the working directory set to its root.

    Layout:
        go.mod
        hello/hello.go   (package hello; funcs test1, withArgs, withReturn)
    """
    root = tmp_path / "mod"
    pkg = root / "hello"
    pkg.mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/mod\n\ngo 1.18\n")
    (pkg / "hello.go").write_text(
        'package hello\n'
        '\n'
        'import "fmt"\n'
        '\n'
        'func test1() {\n'
        '\tfmt.Println("test1")\n'
        '}\n'
        '\n'
        'func withArgs(s string) {\n'
        '\tfmt.Println(s)\n'
        '}\n'
        '\n'
        'func withReturn() int {\n'
        '\tfmt.Println("withReturn")\n'
        '\treturn 1\n'
        '}\n'
    )
    monkeypatch.chdir(root)
    return root
