import asyncio
from types import SimpleNamespace
from unittest.mock import patch

import pytest

import run


class FakeServer:
    """Stands in for uvicorn.Server; ``starts`` decides whether startup succeeds."""

    def __init__(self, starts: bool, port: int, keep_running: bool = False):
        self.started = False
        self.config = SimpleNamespace(port=port)
        self.cancelled = False
        self._starts = starts
        self._keep_running = keep_running

    async def serve(self):
        if not self._starts:
            return
        self.started = True
        if self._keep_running:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise


def test_failed_startup_stops_everything_and_reports_failure(caplog):
    books = FakeServer(starts=False, port=9099)
    people = FakeServer(starts=True, port=1234, keep_running=True)

    with patch.object(run, "_server", side_effect=[books, people]):
        ok = asyncio.run(run.serve("all"))

    assert ok is False
    assert people.cancelled
    assert "failed to start" in caplog.text


def test_clean_exit_reports_success():
    with patch.object(run, "_server", side_effect=[FakeServer(starts=True, port=9099)]):
        assert asyncio.run(run.serve("books")) is True


def test_main_exits_non_zero_on_failure():
    async def failing(service):
        return False

    with patch.object(run, "serve", failing), patch("sys.argv", ["run.py", "--service", "books"]):
        with pytest.raises(SystemExit) as excinfo:
            run.main()
    assert excinfo.value.code == 1
