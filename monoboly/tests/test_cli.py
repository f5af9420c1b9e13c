"""
Tests for the command-line harness.
"""

import json

import pytest

from ..cli import main


class TestCLI:
    """Tests for the monoboly command."""

    def test_deck(self, capsys):
        main(["deck"])
        out = capsys.readouterr().out

        assert "Total: 106" in out
        assert "money (20)" in out
        assert "10 x Pass Go [1M]" in out

    def test_demo(self, capsys):
        main(["demo", "--players", "3", "--seed", "3"])
        out = capsys.readouterr().out

        assert "First turn: player" in out
        assert '"my_turn": true' in out
        assert '"started": true' in out

    def test_demo_banks_one_card(self, capsys):
        main(["demo", "--players", "2", "--seed", "11"])
        out = capsys.readouterr().out

        player_json = out[out.rindex('{\n  "name"'):]
        state = json.loads(player_json)
        assert len(state["bank"]) == 1
        assert len(state["hand"]) == 6

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])

    def test_bad_log_level_still_runs(self, capsys, monkeypatch):
        monkeypatch.setenv("MONOBOLY_LOG_LEVEL", "chatty")
        main(["deck"])

        assert "Total: 106" in capsys.readouterr().out
