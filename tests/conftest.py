from __future__ import annotations

import os
import sys

import pytest


def _ensure_src_on_path() -> None:
    # Lets the tests run from a plain checkout, without `pip install -e .` first.
    src = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
    if src not in sys.path:
        sys.path.insert(0, src)


_ensure_src_on_path()

from docstore_browser.catalog_client import CatalogClient, QueryError  # noqa: E402


class FakeCatalog(CatalogClient):
    """In-memory store: {database: {collection: [documents]}}."""

    def __init__(self, data: dict):
        self.data = data
        self.calls: list[tuple] = []
        self.fail_on: set[tuple] = set()

    def _check(self, call: tuple) -> None:
        self.calls.append(call)
        if call in self.fail_on:
            raise QueryError(f"{call[0]} failed")

    def list_top_level_containers(self):
        self._check(("list_top",))
        return list(self.data)

    def list_sub_containers(self, container):
        self._check(("list_sub", container))
        return list(self.data[container])

    def fetch_all_records(self, container, collection):
        self._check(("fetch", container, collection))
        return list(self.data[container][collection])

    def format_record(self, record):
        return repr(record)


class FakeScreen:
    """Just enough of a curses window for CursesTerminal."""

    def __init__(self, rows: int = 10, cols: int = 40, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.cells: dict[int, str] = {}
        self.attrs: dict[tuple[int, int], int] = {}
        self.cursor = (0, 0)
        self.refreshed = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def getyx(self):
        return self.cursor

    def keypad(self, flag):
        pass

    def erase(self):
        self.cells.clear()
        self.attrs.clear()

    def addstr(self, y, x, text, attr=0):
        line = self.cells.get(y, "")
        line = line.ljust(x) + text + line[x + len(text):]
        self.cells[y] = line
        self.attrs[(y, x)] = attr

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        self.refreshed += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def line(self, y: int) -> str:
        return self.cells.get(y, "").rstrip()


@pytest.fixture
def store_data():
    return {
        "alpha": {"beta": [], "gamma": [{"_id": 1, "x": "a"}, {"_id": 2, "x": "b"}]},
        "beta": {"users": [{"_id": 7}]},
        "empty": {},
    }


@pytest.fixture
def catalog(store_data):
    return FakeCatalog(store_data)
