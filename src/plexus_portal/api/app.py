"""
Plexus Portal — Registracije → FIRA (FastAPI)

  GET  /api/fira/status               — je li integracija konfigurirana
  POST /api/fira/orders/preview       — FIRA narudžba bez slanja
  POST /api/fira/invoices             — kreiraj (fiskalni) račun
  GET  /api/fira/invoices/{fira_id}   — status računa u FIRA-i
"""

import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from plexus_portal.core.config import PortalConfig
from plexus_portal.core.errors import IntegrationError
from plexus_portal.modules.fira import (
    Addon,
    BillingInfo,
    FiraClient,
    InvoiceType,
    PaymentType,
    RegistrationOrder,
)

logger = logging.getLogger("plexus_portal.api")

# ═══════════════════════════════════════════
# PYDANTIC MODELS
# ═══════════════════════════════════════════

class AddonRequest(BaseModel):
    name: str
    price: Decimal = Decimal("0")


class BillingRequest(BaseModel):
    name: str = ""
    company: Optional[str] = None
    address: str = ""
    city: str = ""
    zip: str = ""
    country: str = "HR"
    oib: Optional[str] = None
    vat_number: Optional[str] = None
    email: str = ""


class RegistrationOrderRequest(BaseModel):
    invoice_number: str
    ticket_name: str
    ticket_price: Decimal
    addons: List[AddonRequest] = Field(default_factory=list)
    billing: BillingRequest = Field(default_factory=BillingRequest)
    invoice_type: Optional[InvoiceType] = None
    payment_type: Optional[PaymentType] = None

    def to_order(self) -> RegistrationOrder:
        b = self.billing
        return RegistrationOrder(
            invoice_number=self.invoice_number,
            ticket_name=self.ticket_name,
            ticket_price=self.ticket_price,
            addons=[Addon(name=a.name, price=a.price) for a in self.addons],
            billing=BillingInfo(
                name=b.name, company=b.company, address=b.address, city=b.city,
                zip=b.zip, country=b.country, tax_id=b.oib, vat_number=b.vat_number,
                email=b.email,
            ),
            invoice_type=self.invoice_type,
            payment_type=self.payment_type,
        )


# ═══════════════════════════════════════════
# APP FACTORY
# ═══════════════════════════════════════════

def create_app(client: Optional[FiraClient] = None,
               config: Optional[PortalConfig] = None) -> FastAPI:
    fira = client or FiraClient()
    config = config or PortalConfig.from_env()

    app = FastAPI(title="Plexus Portal — FIRA", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.fira = fira

    @app.get("/api/fira/status")
    def fira_status():
        return {
            "configured": fira.is_configured(),
            "api_url": fira.config.api_url,
            "auth_mode": fira.config.auth_mode,
        }

    @app.post("/api/fira/orders/preview")
    def preview_order(req: RegistrationOrderRequest):
        return fira.build_order(req.to_order())

    @app.post("/api/fira/invoices")
    def create_invoice(req: RegistrationOrderRequest):
        try:
            result = fira.create_fiscal_invoice(req.to_order())
        except IntegrationError as e:
            raise HTTPException(status_code=502, detail=e.to_dict())
        if result is None:
            return {"demo": True, "invoice": None}
        return {"demo": False, "invoice": result.to_dict()}

    @app.get("/api/fira/invoices/{fira_id}")
    def invoice_status(fira_id: str):
        data = fira.get_invoice_status(fira_id)
        if data is None:
            raise HTTPException(status_code=404, detail="Status računa nije dostupan")
        return data

    return app
