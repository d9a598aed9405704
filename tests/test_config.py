"""
Tests for chksum settings loading.

Tests verify:
- Defaults when no config file exists
- .chksum/config.toml and pyproject.toml [tool.chksum] discovery
- Environment variables override TOML values
- Invalid values are rejected and broken files are reported
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chksum.core.exceptions import ConfigFileError, ConfigValidationError
from chksum.core.models.config import ChecksumConfig, ChksumConfig
from chksum.core.settings import find_config_file, load_settings


def _write_config(root: Path, content: str) -> Path:
    config_dir = root / ".chksum"
    config_dir.mkdir()
    path = config_dir / "config.toml"
    path.write_text(content)
    return path


class TestDefaults:
    """Tests for default settings."""

    def test_defaults_without_config(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.checksum.algorithm == "sha256"
        assert settings.checksum.digest_length == 8
        assert settings.logging.level == "warning"
        assert settings.logging.console is False
        assert settings.logging.file is False
        assert settings.config_file is None

    def test_settings_match_model_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))
        expected = ChksumConfig().to_dict()
        actual = settings.to_dict()
        assert actual["checksum"] == expected["checksum"]
        assert actual["logging"] == expected["logging"]


class TestConfigFile:
    """Tests for TOML config loading."""

    def test_find_config_file(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(str(nested)) == path

    def test_load_from_config_toml(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            '[checksum]\nalgorithm = "git"\ndigest_length = 12\n\n[logging]\nlevel = "debug"\n',
        )
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.checksum.algorithm == "git"
        assert settings.checksum.digest_length == 12
        assert settings.logging.level == "debug"
        assert settings.config_file == str(path)

    def test_load_from_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.chksum.checksum]\nalgorithm = "md5"\n')
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.checksum.algorithm == "md5"

    def test_pyproject_without_section_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config_file(str(tmp_path)) is None

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[checksum]\nalgorithm = "sha1"\n')
        settings = load_settings(config_path=path)
        assert settings.checksum.algorithm == "sha1"

    def test_broken_toml_reports_error(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[checksum\nalgorithm = ")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.checksum.algorithm == "sha256"
        assert settings.config_error is not None
        assert "Failed to parse" in settings.config_error

    def test_unknown_algorithm_rejected(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[checksum]\nalgorithm = "crc32"\n')
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert exc_info.value.context["key"] == "checksum.algorithm"
        assert exc_info.value.context["value"] == "crc32"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_unreadable_config_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileError) as exc_info:
            load_settings(config_path=tmp_path)
        assert exc_info.value.context["file_path"] == str(tmp_path)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestEnvironment:
    """Tests for CHKSUM_* environment variables."""

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, '[checksum]\nalgorithm = "git"\ndigest_length = 12\n')
        monkeypatch.setenv("CHKSUM_CHECKSUM__ALGORITHM", "sha512")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.checksum.algorithm == "sha512"
        assert settings.checksum.digest_length == 12

    def test_env_logging(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHKSUM_LOGGING__CONSOLE", "true")
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.logging.console is True

    def test_invalid_env_value_rejected(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHKSUM_CHECKSUM__DIGEST_LENGTH", "-3")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_settings(start_dir=str(tmp_path))
        assert exc_info.value.context["key"] == "checksum.digest_length"


class TestChecksumConfig:
    """Tests for ChecksumConfig validation."""

    def test_canonicalizes_algorithm(self) -> None:
        assert ChecksumConfig(algorithm="git-blob").algorithm == "git"
        assert ChecksumConfig(algorithm=" SHA1 ").algorithm == "sha1"
        assert ChecksumConfig(algorithm="").algorithm == "sha256"

    def test_negative_digest_length(self) -> None:
        with pytest.raises(ValidationError):
            ChecksumConfig(digest_length=-1)

    def test_dot_get(self) -> None:
        config = ChksumConfig()
        assert config.get("checksum.algorithm") == "sha256"
        assert config.get("checksum.missing", "x") == "x"
