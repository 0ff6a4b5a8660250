"""Tests for configuration loading."""

from pathlib import Path

import pytest

from playorder.core import config as config_module
from playorder.core.config import (
    Config,
    get_config_dir,
    get_data_dir,
    get_log_file_path,
    load_config,
    parse_player_command,
    validate_log_level,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    """Point XDG directories at a temp dir and clear overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("PLAYORDER_PLAYER", raising=False)
    monkeypatch.delenv("PLAYORDER_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


class TestDirectories:
    """Tests for XDG directory helpers."""

    def test_config_dir(self, tmp_path: Path) -> None:
        assert get_config_dir() == tmp_path / "config" / "playorder"

    def test_data_dir(self, tmp_path: Path) -> None:
        assert get_data_dir() == tmp_path / "data" / "playorder"

    def test_default_log_file(self, tmp_path: Path) -> None:
        assert get_log_file_path(Config()) == tmp_path / "data" / "playorder" / "playorder.log"


class TestParsePlayerCommand:
    """Tests for parse_player_command."""

    def test_string_is_split(self) -> None:
        assert parse_player_command('mpv --no-video "--title=x y"') == [
            "mpv",
            "--no-video",
            "--title=x y",
        ]

    def test_list_kept(self) -> None:
        assert parse_player_command(["ffplay", "-nodisp", "-autoexit"]) == [
            "ffplay",
            "-nodisp",
            "-autoexit",
        ]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_player_command("")


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self) -> None:
        """No config file means defaults, and nothing is created."""
        config = load_config()
        assert config.music.supported_formats == [".mp3"]
        assert config.music.scan_recursive is True
        assert config.logging.level == "INFO"
        assert config.player.command == config_module.default_player_command()
        assert not get_config_dir().exists()

    def test_reads_local_config(self, tmp_path: Path) -> None:
        """config.toml in the working directory is picked up."""
        (tmp_path / "config.toml").write_text(
            """
[music]
supported_formats = ["mp3", ".FLAC"]
scan_recursive = false

[player]
command = "ffplay -nodisp -autoexit"

[logging]
level = "debug"
log_file = "~/logs/playorder.log"
max_file_size_mb = 2
""",
            encoding="utf-8",
        )
        config = load_config()
        assert config.music.supported_formats == [".mp3", ".flac"]
        assert config.music.scan_recursive is False
        assert config.player.command == ["ffplay", "-nodisp", "-autoexit"]
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == str(Path("~/logs/playorder.log").expanduser())
        assert config.logging.max_file_size_mb == 2
        assert config.logging.backup_count == 5

    def test_xdg_config(self, tmp_path: Path) -> None:
        """Falls back to the XDG config directory."""
        config_dir = tmp_path / "config" / "playorder"
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text(
            '[player]\ncommand = ["afplay"]\n', encoding="utf-8"
        )
        assert load_config().player.command == ["afplay"]

    def test_invalid_toml_uses_defaults(self, tmp_path: Path) -> None:
        """A broken file falls back to defaults instead of failing."""
        (tmp_path / "config.toml").write_text("[music\nbroken", encoding="utf-8")
        config = load_config()
        assert config.music.supported_formats == [".mp3"]

    def test_env_overrides(self, tmp_path: Path, monkeypatch) -> None:
        """Environment variables win over the file."""
        (tmp_path / "config.toml").write_text(
            '[player]\ncommand = "afplay"\n', encoding="utf-8"
        )
        monkeypatch.setenv("PLAYORDER_PLAYER", "mpv --no-video")
        monkeypatch.setenv("PLAYORDER_LOG_LEVEL", "warning")
        config = load_config()
        assert config.player.command == ["mpv", "--no-video"]
        assert config.logging.level == "WARNING"

    def test_dotenv_in_config_dir(self, tmp_path: Path, monkeypatch) -> None:
        """A .env file in the config directory feeds the overrides."""
        config_dir = tmp_path / "config" / "playorder"
        config_dir.mkdir(parents=True)
        (config_dir / ".env").write_text("PLAYORDER_LOG_LEVEL=error\n", encoding="utf-8")
        try:
            assert load_config().logging.level == "ERROR"
        finally:
            monkeypatch.delenv("PLAYORDER_LOG_LEVEL", raising=False)


class TestValidateLogLevel:
    """Tests for validate_log_level."""

    def test_known_level_normalized(self) -> None:
        assert validate_log_level(" debug ") == "DEBUG"

    def test_unknown_level_falls_back(self, capsys) -> None:
        assert validate_log_level("verbose", "test") == "INFO"
        assert "verbose" in capsys.readouterr().out


class TestInvalidValues:
    """Tests for values that load_config must not pass through."""

    def test_unknown_toml_log_level(self, tmp_path: Path, capsys) -> None:
        """An unknown level in the file falls back to INFO with a warning."""
        (tmp_path / "config.toml").write_text(
            '[logging]\nlevel = "VERBOSE"\nbackup_count = 2\n', encoding="utf-8"
        )
        config = load_config()
        assert config.logging.level == "INFO"
        assert config.logging.backup_count == 2
        assert "VERBOSE" in capsys.readouterr().out

    def test_unknown_env_log_level(self, monkeypatch, capsys) -> None:
        """An unknown PLAYORDER_LOG_LEVEL falls back to INFO with a warning."""
        monkeypatch.setenv("PLAYORDER_LOG_LEVEL", "loud")
        assert load_config().logging.level == "INFO"
        assert "PLAYORDER_LOG_LEVEL" in capsys.readouterr().out

    def test_formats_string_rejected(self, tmp_path: Path) -> None:
        """A bare string is not split into characters."""
        (tmp_path / "config.toml").write_text(
            '[music]\nsupported_formats = "mp3"\n', encoding="utf-8"
        )
        assert load_config().music.supported_formats == [".mp3"]

    def test_formats_non_string_entry_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text(
            '[music]\nsupported_formats = [".mp3", 3]\n', encoding="utf-8"
        )
        assert load_config().music.supported_formats == [".mp3"]

    def test_scan_recursive_string_rejected(self, tmp_path: Path) -> None:
        """A string like "no" is not treated as true."""
        (tmp_path / "config.toml").write_text(
            '[music]\nscan_recursive = "no"\nsupported_formats = [".flac"]\n',
            encoding="utf-8",
        )
        config = load_config()
        assert config.music.scan_recursive is True
        assert config.music.supported_formats == [".mp3"]

    def test_console_output_string_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "config.toml").write_text(
            '[logging]\nconsole_output = "yes"\n', encoding="utf-8"
        )
        assert load_config().logging.console_output is False
