"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from elasticscout.config.settings import ConnectionSettings, Settings


class TestConnectionSettings:
    def test_defaults(self) -> None:
        conn = ConnectionSettings()
        assert conn.hosts == ["http://localhost:9200"]
        assert conn.verify_certs is True

    def test_hosts_from_json_string(self) -> None:
        conn = ConnectionSettings(hosts='["https://a:9200", "https://b:9200"]')
        assert conn.hosts == ["https://a:9200", "https://b:9200"]

    def test_hosts_from_plain_string(self) -> None:
        assert ConnectionSettings(hosts="https://a:9200").hosts == ["https://a:9200"]


class TestSettings:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ELASTICSCOUT_CONNECTION__USERNAME", "scout")
        monkeypatch.setenv("ELASTICSCOUT_CONNECTION__TIMEOUT", "30")
        monkeypatch.setenv("ELASTICSCOUT_OBSERVABILITY__LOG_FORMAT", "console")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.connection.username == "scout"
        assert settings.connection.timeout == 30.0
        assert settings.observability.log_format == "console"

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "scout.yaml"
        config.write_text(
            "connection:\n"
            "  hosts:\n"
            "    - https://search-1:9200\n"
            "  verify_certs: false\n"
            "observability:\n"
            "  log_level: debug\n"
        )

        settings = Settings.from_yaml(config)

        assert settings.connection.hosts == ["https://search-1:9200"]
        assert settings.connection.verify_certs is False
        assert settings.observability.log_level == "debug"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")
