"""Tests for the management CLI."""
from unittest.mock import MagicMock

from click.testing import CliRunner

import manage
from app.services.pick_backend import BackendError


class TestStatus:
    def test_reports_open_picks(self):
        result = CliRunner().invoke(manage.cli, ["status"])
        assert result.exit_code == 0
        assert "Picks: open" in result.output
        assert "https://backend.test/exec" in result.output


class TestPingBackend:
    def test_reports_fight_count(self, monkeypatch):
        backend = MagicMock()
        backend.fetch_fights.return_value = [{"fight": "Main Event"}, {"fight": "Co-Main"}]
        monkeypatch.setitem(manage.app.extensions, "pick_backend", backend)

        result = CliRunner().invoke(manage.cli, ["ping-backend"])

        assert result.exit_code == 0
        assert "2 fights" in result.output

    def test_reports_error(self, monkeypatch):
        backend = MagicMock()
        backend.fetch_fights.side_effect = BackendError("getFights", "backend unreachable")
        monkeypatch.setitem(manage.app.extensions, "pick_backend", backend)

        result = CliRunner().invoke(manage.cli, ["ping-backend"])

        assert result.exit_code == 1
        assert "backend unreachable" in result.output
