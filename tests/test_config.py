"""
Tests for configuration and YAML build profiles.

Run with: pytest tests/test_config.py -v
"""

import pytest

from slidemend.core.config import BuildProfile, Config, load_build_profile


class TestConfig:
    def test_defaults_validate(self):
        assert Config.validate() is True

    def test_invalid_timeout_rejected(self, monkeypatch):
        monkeypatch.setattr(Config, "BUILD_TIMEOUT", 0)
        with pytest.raises(ValueError, match="SLIDEMEND_BUILD_TIMEOUT"):
            Config.validate()

    def test_get(self):
        assert Config.get("SLIDES_PATH") == Config.SLIDES_PATH
        assert Config.get("NOT_A_SETTING", "fallback") == "fallback"


class TestLoadBuildProfile:
    def test_full_profile(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text(
            "command: npx slidev build --out public\n"
            "cwd: decks/pr-12\n"
            "slides: deck.md\n"
            "timeout: 120\n"
            "sanitize_first: true\n"
            "fallback_title: Deck Failed\n"
        )

        profile = load_build_profile(profile_path)

        assert profile.command == ["npx", "slidev", "build", "--out", "public"]
        assert profile.cwd == "decks/pr-12"
        assert profile.slides_path == "deck.md"
        assert profile.timeout == 120
        assert profile.sanitize_first is True
        assert profile.fallback_title == "Deck Failed"

    def test_command_as_list(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text("command:\n  - bun\n  - run\n  - build\n")

        assert load_build_profile(profile_path).command == ["bun", "run", "build"]

    def test_empty_file_uses_defaults(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text("")

        profile = load_build_profile(profile_path)

        assert profile == BuildProfile()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_build_profile(tmp_path / "nope.yml")

    def test_not_a_mapping(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_build_profile(profile_path)

    def test_bad_timeout(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text("timeout: -1\n")

        with pytest.raises(ValueError, match="timeout"):
            load_build_profile(profile_path)

    def test_bad_command_type(self, tmp_path):
        profile_path = tmp_path / "slidemend.yml"
        profile_path.write_text("command: 42\n")

        with pytest.raises(ValueError, match="command"):
            load_build_profile(profile_path)
