"""
Tests for game plugin discovery and manifest loading.
"""
import pytest

from engine.app.loader import game_root_for, load_game_manifest, load_game_module
from games.whack_a_mole.config import RoundConfig


class TestManifest:
    """manifest.yaml handling."""

    def test_whack_a_mole_manifest(self):
        """The shipped manifest loads and builds a valid config."""
        manifest = load_game_manifest(game_root_for("whack_a_mole"))
        assert manifest["title"] == "Whack-a-Mole"
        cfg = RoundConfig.from_manifest(manifest)
        assert cfg.starting_time == 30.0
        assert cfg.slot_count == 9

    def test_missing_manifest(self, tmp_path):
        """A game folder without manifest.yaml is an error."""
        with pytest.raises(FileNotFoundError, match="manifest.yaml"):
            load_game_manifest(tmp_path)

    def test_manifest_must_be_mapping(self, tmp_path):
        """A manifest that isn't a mapping is rejected."""
        (tmp_path / "manifest.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_game_manifest(tmp_path)

    def test_empty_manifest(self, tmp_path):
        """An empty manifest reads as an empty mapping."""
        (tmp_path / "manifest.yaml").write_text("", encoding="utf-8")
        assert load_game_manifest(tmp_path) == {}


class TestGameModule:
    """Plugin import."""

    def test_unknown_game(self):
        """Asking for a game that isn't there fails clearly."""
        with pytest.raises(FileNotFoundError, match="no-such-game"):
            game_root_for("no-such-game")

    def test_missing_main(self, tmp_path):
        """A game folder without main.py is an error."""
        with pytest.raises(FileNotFoundError, match="main.py"):
            load_game_module(tmp_path)

    def test_load_whack_a_mole(self):
        """The shipped game exposes get_game()."""
        module = load_game_module(game_root_for("whack_a_mole"))
        game = module.get_game()
        assert hasattr(game, "on_update")
