"""Plexus Portal — greške FIRA integracije."""

from typing import Optional


class FiraError(Exception):
    """Bazna greška FIRA integracije."""


class ConfigurationError(FiraError):
    """Neispravna konfiguracija integracije (npr. nepoznat auth mod)."""


class IntegrationError(FiraError):
    """FIRA API je vratio ne-2xx odgovor ili transport nije uspio.

    ``status_code`` je None kad odgovor uopće nije stigao.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict:
        return {"message": str(self), "status_code": self.status_code, "body": self.body}
