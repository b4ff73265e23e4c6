"""
Tests for Settings
==================
Tests for bundled defaults, the user config file, environment overrides
and config directory resolution in xkcdpwd/settings.py.
"""

import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from xkcdpwd.settings import (
    Settings,
    default_config_dir,
    default_config_file,
    env_overrides,
    get_setting,
    load_app_config,
    load_settings,
    load_user_config,
    resolve_path,
)


def write_user_config(text: str) -> Path:
    path = default_config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestAppConfig:
    """Tests for the bundled app.yaml."""

    def test_loads(self):
        cfg = load_app_config()
        assert "passphrase" in cfg

    def test_get_setting(self):
        assert get_setting("passphrase.words") == 4
        assert get_setting("passphrase.separator") == " "
        assert get_setting("entropy.min_bits") == 30.0

    def test_get_setting_default(self):
        assert get_setting("passphrase.missing", "x") == "x"
        assert get_setting("nope.at.all") is None

    def test_resolve_path(self, tmp_path):
        assert resolve_path("cfg.yaml", base=tmp_path) == tmp_path.resolve() / "cfg.yaml"
        assert resolve_path(str(tmp_path / "a")) == tmp_path / "a"

    def test_resolve_path_requires_value(self):
        with pytest.raises(ValueError):
            resolve_path(None)


class TestConfigLocation:
    """Tests for the OS specific config directory."""

    def test_linux(self):
        assert default_config_dir("foo", platform="linux", environ={}) == Path("foo/.config")

    def test_linux_xdg(self):
        got = default_config_dir("bar", platform="linux", environ={"XDG_CONFIG_HOME": "/foo"})
        assert got == Path("/foo")

    def test_darwin(self):
        got = default_config_dir("foo", platform="darwin", environ={})
        assert got == Path("foo/Library/Application Support")

    def test_darwin_ignores_xdg(self):
        got = default_config_dir("foo", platform="darwin", environ={"XDG_CONFIG_HOME": "/foo"})
        assert got == Path("foo/Library/Application Support")

    def test_windows_appdata(self):
        got = default_config_dir("foo", platform="win32", environ={"APPDATA": "C:/Users/u/AppData/Roaming"})
        assert got == Path("C:/Users/u/AppData/Roaming")

    def test_windows_fallback(self):
        got = default_config_dir("foo", platform="win32", environ={})
        assert got == Path("foo/AppData/Roaming")

    def test_config_file(self):
        got = default_config_file("foo", home="/home/user", platform="linux", environ={})
        assert got == Path("/home/user/.config/foo/foo.conf")

    def test_config_file_default_app(self, isolated_config):
        got = default_config_file()
        assert got.name == "xkcdpwd.conf"
        assert got.parent.name == "xkcdpwd"


class TestSettings:
    """Tests for merged settings."""

    def test_defaults(self):
        s = Settings()
        assert s.words == 4
        assert s.passphrases == 1
        assert s.separator == " "
        assert s.capitalize == "none"
        assert s.min_length == 0
        assert s.max_length == 0
        assert s.language == "en"

    def test_coerces_integers(self):
        s = Settings(words="6", min_length="3")
        assert s.words == 6
        assert s.min_length == 3

    def test_invalid_integer(self):
        with pytest.raises(ValueError, match="words"):
            Settings(words="many")

    @pytest.mark.parametrize("value", [4.9, 4.0, True, False, "4.9", "", [4]])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError, match="words"):
            Settings(words=value)

    def test_accepts_signed_digit_strings(self):
        assert Settings(words=" 5 ", min_length="-1").words == 5
        assert Settings(min_length="-1").min_length == -1

    def test_yaml_float_rejected(self, tmp_path):
        path = tmp_path / "float.yaml"
        path.write_text("words: 4.9\n")
        with pytest.raises(ValueError, match="must be an integer"):
            load_settings(path)

    def test_yaml_bool_rejected(self, tmp_path):
        path = tmp_path / "bool.yaml"
        path.write_text("words: true\n")
        with pytest.raises(ValueError, match="must be an integer"):
            load_settings(path)

    def test_merged(self):
        s = Settings().merged(words=5, separator="-", capitalize=None)
        assert s.words == 5
        assert s.separator == "-"
        assert s.capitalize == "none"

    def test_merged_keeps_empty_separator(self):
        assert Settings().merged(separator="").separator == ""


class TestLoadSettings:
    """Tests for layering file, environment and defaults."""

    def test_no_user_config(self):
        s = load_settings()
        assert s.words == 4
        assert s.language == "en"

    def test_user_config_file(self):
        write_user_config("words: 6\nseparator: '-'\ncapitalize: first\n")
        s = load_settings()
        assert s.words == 6
        assert s.separator == "-"
        assert s.capitalize == "first"
        assert s.passphrases == 1

    def test_user_config_nested(self):
        write_user_config("passphrase:\n  passphrases: 3\n  max_length: 6\n")
        s = load_settings()
        assert s.passphrases == 3
        assert s.max_length == 6

    def test_explicit_config(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("min_length: 5\n")
        assert load_settings(path).min_length == 5

    def test_explicit_config_missing(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("words: [unclosed\n")
        with pytest.raises(ValueError, match="cannot read config file"):
            load_settings(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- words\n- 5\n")
        with pytest.raises(ValueError, match="mapping"):
            load_user_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_user_config(path) == {}
        assert load_settings(path).words == 4

    def test_unknown_keys_warned(self, tmp_path, caplog):
        path = tmp_path / "extra.yaml"
        path.write_text("words: 5\ncolour: blue\n")
        with caplog.at_level(logging.WARNING, logger="xkcdpwd.settings"):
            s = load_settings(path)
        assert s.words == 5
        assert "colour" in caplog.text

    def test_environment(self):
        s = load_settings(environ={"XKCDPWD_WORDS": "7", "XKCDPWD_SEPARATOR": "_"})
        assert s.words == 7
        assert s.separator == "_"

    def test_environment_beats_file(self, monkeypatch):
        write_user_config("words: 6\nlanguage: en\n")
        monkeypatch.setenv("XKCDPWD_WORDS", "8")
        s = load_settings()
        assert s.words == 8

    def test_env_overrides(self):
        got = env_overrides({"XKCDPWD_MIN_LENGTH": "4", "XKCDPWD_BOGUS": "1", "WORDS": "9"})
        assert got == {"min_length": "4"}
