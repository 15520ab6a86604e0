"""
Plexus Portal — Konfiguracija

FIRA integracija i landing server. Okolina se čita samo jednom
(``from_env``), a gotovi objekti se prosljeđuju klijentu i aplikacijama.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from plexus_portal.core.errors import ConfigurationError

DEFAULT_FIRA_API_URL = "https://app.fira.finance"
DEFAULT_LANDING_HTML = Path(__file__).resolve().parent.parent / "landing" / "index.html"

AUTH_BEARER = "bearer"
AUTH_HEADER = "header"
AUTH_MODES = (AUTH_BEARER, AUTH_HEADER)


@dataclass(frozen=True)
class FiraConfig:
    """Konfiguracija FIRA Custom Webshop API-ja."""

    api_url: str = DEFAULT_FIRA_API_URL
    api_key: str = ""                    # Prazno = demo mod (bez fiskalizacije)
    auth_mode: str = AUTH_BEARER         # bearer | header
    auth_header: str = "FIRA-Api-Key"    # Koristi se samo u "header" modu
    timeout: float = 30.0
    event_name: str = "Plexus 2026"

    def __post_init__(self):
        if self.auth_mode not in AUTH_MODES:
            raise ConfigurationError(
                f"Nepoznat FIRA auth mod: {self.auth_mode!r} (dozvoljeno: {', '.join(AUTH_MODES)})"
            )
        if self.auth_mode == AUTH_HEADER and not self.auth_header:
            raise ConfigurationError("FIRA auth mod 'header' zahtijeva naziv headera")
        object.__setattr__(self, "api_url", (self.api_url or DEFAULT_FIRA_API_URL).rstrip("/"))

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def auth_headers(self) -> dict:
        """HTTP headeri s vjerodajnicom prema odabranom modu."""
        if not self.api_key:
            return {}
        if self.auth_mode == AUTH_HEADER:
            return {self.auth_header: self.api_key}
        return {"Authorization": f"Bearer {self.api_key}"}

    @classmethod
    def from_env(cls, environ=None) -> "FiraConfig":
        env = os.environ if environ is None else environ
        return cls(
            api_url=env.get("FIRA_API_URL", DEFAULT_FIRA_API_URL),
            api_key=env.get("FIRA_API_KEY", ""),
            auth_mode=env.get("FIRA_AUTH_MODE", AUTH_BEARER).strip().lower(),
            auth_header=env.get("FIRA_AUTH_HEADER", "FIRA-Api-Key"),
            timeout=float(env.get("FIRA_TIMEOUT", "30")),
            event_name=env.get("FIRA_EVENT_NAME", "Plexus 2026"),
        )


@dataclass(frozen=True)
class LandingConfig:
    """Statični landing server — jedan HTML dokument za sve zahtjeve."""

    host: str = "0.0.0.0"
    port: int = 3005
    html_path: Path = field(default=DEFAULT_LANDING_HTML)

    @classmethod
    def from_env(cls, environ=None) -> "LandingConfig":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("LANDING_HOST", "0.0.0.0"),
            port=int(env.get("PORT", "3005")),
            html_path=Path(env.get("LANDING_HTML", str(DEFAULT_LANDING_HTML))),
        )


@dataclass(frozen=True)
class PortalConfig:
    """Portal API (registracije → FIRA)."""

    host: str = "0.0.0.0"
    port: int = 3006
    allowed_origins: tuple = ("*",)

    @classmethod
    def from_env(cls, environ=None) -> "PortalConfig":
        env = os.environ if environ is None else environ
        origins = env.get("PORTAL_ALLOWED_ORIGINS", "*")
        return cls(
            host=env.get("PORTAL_HOST", "0.0.0.0"),
            port=int(env.get("PORTAL_PORT", "3006")),
            allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
