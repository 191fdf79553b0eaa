"""Global pytest configuration for guarded handler tests.

The module ensures the ``src`` tree is importable regardless of whether the
package has been installed, and resets cached settings between tests so
environment overrides made with ``monkeypatch`` take effect.
"""

import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path so imports work without installation
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from guarded_handlers.config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Drop cached settings before and after every test."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class Recorder:
    """Collects calls made by handler bodies in order."""

    def __init__(self) -> None:
        self.calls = []

    def record(self, label, result=None):
        def body(event):
            self.calls.append((label, event))
            return result

        body.__qualname__ = f"record[{label}]"
        return body

    @property
    def labels(self):
        return [label for label, _ in self.calls]


class QueryEvent:
    """Event whose field reads are logged, for asserting short-circuiting."""

    def __init__(self, **values) -> None:
        self._values = values
        self.queried = []

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        self.queried.append(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def query_event():
    return QueryEvent
