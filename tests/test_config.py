"""
Tests: Konfiguracija (FIRA, landing, portal).
"""
from pathlib import Path

import pytest


class TestFiraConfig:
    def test_defaults(self):
        from plexus_portal.core.config import FiraConfig
        cfg = FiraConfig()
        assert cfg.api_url == "https://app.fira.finance"
        assert cfg.api_key == ""
        assert cfg.auth_mode == "bearer"
        assert cfg.timeout == 30.0
        assert cfg.configured is False
        assert cfg.auth_headers() == {}

    def test_from_env(self):
        from plexus_portal.core.config import FiraConfig
        cfg = FiraConfig.from_env({
            "FIRA_API_URL": "https://sandbox.fira.test/",
            "FIRA_API_KEY": "k-123",
            "FIRA_AUTH_MODE": "Header",
            "FIRA_AUTH_HEADER": "X-Api-Key",
            "FIRA_TIMEOUT": "12.5",
        })
        assert cfg.api_url == "https://sandbox.fira.test"
        assert cfg.configured is True
        assert cfg.timeout == 12.5
        assert cfg.auth_headers() == {"X-Api-Key": "k-123"}

    def test_from_process_env(self, monkeypatch):
        from plexus_portal.core.config import FiraConfig
        monkeypatch.setenv("FIRA_API_KEY", "proc-key")
        monkeypatch.delenv("FIRA_API_URL", raising=False)
        monkeypatch.delenv("FIRA_AUTH_MODE", raising=False)
        cfg = FiraConfig.from_env()
        assert cfg.api_key == "proc-key"
        assert cfg.api_url == "https://app.fira.finance"
        assert cfg.auth_headers() == {"Authorization": "Bearer proc-key"}

    def test_empty_env_is_demo_mode(self):
        from plexus_portal.core.config import FiraConfig
        assert FiraConfig.from_env({}).configured is False

    def test_unknown_auth_mode(self):
        from plexus_portal.core.config import FiraConfig
        from plexus_portal.core.errors import ConfigurationError
        with pytest.raises(ConfigurationError, match="auth mod"):
            FiraConfig(auth_mode="basic")

    def test_header_mode_requires_name(self):
        from plexus_portal.core.config import FiraConfig
        from plexus_portal.core.errors import ConfigurationError
        with pytest.raises(ConfigurationError):
            FiraConfig(auth_mode="header", auth_header="")


class TestLandingConfig:
    def test_defaults(self):
        from plexus_portal.core.config import LandingConfig
        cfg = LandingConfig()
        assert cfg.port == 3005
        assert cfg.html_path.name == "index.html"
        assert cfg.html_path.exists()

    def test_from_env(self):
        from plexus_portal.core.config import LandingConfig
        cfg = LandingConfig.from_env({"PORT": "8080", "LANDING_HTML": "/tmp/x.html"})
        assert cfg.port == 8080
        assert cfg.html_path == Path("/tmp/x.html")


class TestPortalConfig:
    def test_from_env(self):
        from plexus_portal.core.config import PortalConfig
        cfg = PortalConfig.from_env({
            "PORTAL_PORT": "9000",
            "PORTAL_ALLOWED_ORIGINS": "https://plexus.hr, https://portal.plexus.hr",
        })
        assert cfg.port == 9000
        assert cfg.allowed_origins == ("https://plexus.hr", "https://portal.plexus.hr")

    def test_defaults(self):
        from plexus_portal.core.config import PortalConfig
        cfg = PortalConfig.from_env({})
        assert cfg.port == 3006
        assert cfg.allowed_origins == ("*",)
