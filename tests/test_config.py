"""Settings tests."""

from dsperms.config import Settings, get_settings


def test_settings_defaults(monkeypatch) -> None:
    """Defaults point at a local Grafana and prune undeclared grants."""
    for name in (
        "DSPERMS_GRAFANA_URL",
        "DSPERMS_GRAFANA_ORG_ID",
        "DSPERMS_PRUNE_UNDECLARED",
        "DSPERMS_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.grafana_url == "http://localhost:3000"
    assert settings.grafana_org_id is None
    assert settings.prune_undeclared is True
    assert settings.log_format == "text"


def test_settings_from_environment(monkeypatch) -> None:
    """DSPERMS_ prefixed variables override defaults."""
    monkeypatch.setenv("DSPERMS_GRAFANA_URL", "https://grafana.example.com")
    monkeypatch.setenv("DSPERMS_GRAFANA_ORG_ID", "4")
    monkeypatch.setenv("DSPERMS_PRUNE_UNDECLARED", "false")
    settings = Settings(_env_file=None)
    assert settings.grafana_url == "https://grafana.example.com"
    assert settings.grafana_org_id == 4
    assert settings.prune_undeclared is False


def test_get_settings_is_cached() -> None:
    """get_settings returns the same instance."""
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
