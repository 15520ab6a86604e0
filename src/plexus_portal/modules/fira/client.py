"""
Plexus Portal — FIRA Custom Webshop API klijent

  POST {base}/api/v1/webshop/order/custom   → kreiranje (fiskalnog) računa
  GET  {base}/api/v1/webshop/order/{id}     → status narudžbe

Bez FIRA_API_KEY klijent radi u demo modu: ništa se ne šalje.
Neuspjelo slanje se ne ponavlja, greška ide pozivatelju.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from plexus_portal.core.config import FiraConfig
from plexus_portal.core.errors import IntegrationError
from plexus_portal.modules.fira.order import RegistrationOrder, build_fira_order

logger = logging.getLogger("plexus_portal.fira")

ORDER_CREATE_PATH = "/api/v1/webshop/order/custom"
ORDER_STATUS_PATH = "/api/v1/webshop/order/{fira_id}"


@dataclass
class FiraInvoiceResult:
    """Normalizirani odgovor FIRA-e nakon kreiranja računa."""
    fira_id: Any = None
    invoice_number: Optional[str] = None
    status: Optional[str] = None
    pdf_url: Optional[str] = None
    raw_response: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "FiraInvoiceResult":
        return cls(
            fira_id=data.get("id"),
            invoice_number=data.get("invoiceNumber"),
            status=data.get("status"),
            pdf_url=data.get("pdfUrl") or data.get("pdf_url") or None,
            raw_response=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "externalId": self.fira_id,
            "invoiceNumber": self.invoice_number,
            "status": self.status,
            "pdfUrl": self.pdf_url,
            "rawResponse": self.raw_response,
        }


class FiraClient:
    """Tanki omotač oko FIRA API-ja. Svaki poziv otvara vlastiti httpx.Client."""

    def __init__(self, config: Optional[FiraConfig] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.config = config or FiraConfig.from_env()
        self._transport = transport

    def is_configured(self) -> bool:
        return self.config.configured

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.config.api_url,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    def build_order(self, order: RegistrationOrder) -> Dict[str, Any]:
        return build_fira_order(order, event_name=self.config.event_name)

    def create_fiscal_invoice(self, order: RegistrationOrder) -> Optional[FiraInvoiceResult]:
        """Pošalji narudžbu FIRA-i. None = demo mod (nema API ključa)."""
        if not self.is_configured():
            logger.warning("FIRA_API_KEY nije postavljen — demo mod, račun %s se ne fiskalizira",
                           order.invoice_number)
            return None

        payload = self.build_order(order)
        headers = {"Content-Type": "application/json", **self.config.auth_headers()}

        try:
            with self._client() as client:
                resp = client.post(ORDER_CREATE_PATH, json=payload, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("FIRA transport error za %s: %s", order.invoice_number, e)
            raise IntegrationError(f"FIRA API nedostupan: {e}") from e

        if not resp.is_success:
            body = resp.text
            logger.error("FIRA API error %d: %s", resp.status_code, body)
            raise IntegrationError(
                f"FIRA API returned {resp.status_code}: {body}",
                status_code=resp.status_code, body=body,
            )

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("FIRA API vratio neispravan JSON: %s", resp.text)
            raise IntegrationError("FIRA API vratio neispravan JSON",
                                   status_code=resp.status_code, body=resp.text) from e

        result = FiraInvoiceResult.from_response(data if isinstance(data, dict) else {})
        logger.info("FIRA račun kreiran: %s", result.invoice_number or result.fira_id)
        return result

    def get_invoice_status(self, fira_id) -> Optional[Dict[str, Any]]:
        """Status narudžbe u FIRA-i. Savjetodavno: svaka greška daje None."""
        if not self.is_configured():
            return None

        path = ORDER_STATUS_PATH.format(fira_id=quote(str(fira_id), safe=""))
        try:
            with self._client() as client:
                resp = client.get(path, headers=self.config.auth_headers())
            if not resp.is_success:
                logger.warning("FIRA status %r: HTTP %d", fira_id, resp.status_code)
                return None
            return resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error("FIRA status %s nije dohvaćen: %s", fira_id, e)
            return None
