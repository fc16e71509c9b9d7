"""Pytest configuration and fixtures for prdiff tests."""
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from prdiff.config import _get_config_cached
from prdiff.git.diff_parser import DiffParser
from prdiff.git.patch_parser import PatchParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read a fixture file byte-for-byte (no newline translation)."""
    return (FIXTURES_DIR / name).read_bytes().decode("utf-8")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate tests from PRDIFF_* variables, .env files and the config cache."""
    for var in (
        "PRDIFF_LOG_LEVEL",
        "PRDIFF_WARN_ON_PARSE_ERROR",
        "PRDIFF_JSON_INDENT",
        "PRDIFF_ENCODING",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    _get_config_cached.cache_clear()
    yield
    _get_config_cached.cache_clear()


@pytest.fixture
def diff_parser() -> DiffParser:
    """Create a diff parser instance."""
    return DiffParser()


@pytest.fixture
def patch_parser() -> PatchParser:
    """Create a patch parser instance."""
    return PatchParser()


@pytest.fixture
def dependabot_diff() -> str:
    """Two-file diff from dependabot-core d3c422be (.diff representation)."""
    return load_fixture("dependabot.diff")


@pytest.fixture
def dependabot_patch() -> str:
    """Same change as ``dependabot_diff``, .patch representation."""
    return load_fixture("dependabot.patch")


@pytest.fixture
def rename_only_patch() -> str:
    """Patch renaming LICENSE and README.md without content changes."""
    return load_fixture("rename_only.patch")


@pytest.fixture
def mode_only_patch() -> str:
    """Patch adding and deleting empty files (mode lines only)."""
    return load_fixture("mode_only.patch")


@pytest.fixture
def sample_diff_output() -> str:
    """Sample git diff output with an added, a deleted and a modified file."""
    return """diff --git a/src/main.py b/src/main.py
new file mode 100644
--- /dev/null
+++ b/src/main.py
@@ -0,0 +1,5 @@
+def hello():
+    print("Hello, world!")
+
+if __name__ == "__main__":
+    hello()
diff --git a/src/utils.py b/src/utils.py
deleted file mode 100644
--- a/src/utils.py
+++ /dev/null
@@ -1,3 +0,0 @@
-def old_func():
-    pass
-
diff --git a/src/app.py b/src/app.py
--- a/src/app.py
+++ b/src/app.py
@@ -1,5 +1,6 @@
+import new_module
 def main():
-    old_call()
+    new_call()
     return True
"""
