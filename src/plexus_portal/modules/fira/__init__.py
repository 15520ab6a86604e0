"""
Plexus Portal — FIRA Finance integracija (fiskalizacija kotizacija)

FIRA Custom Webshop API: https://app.fira.finance — Postavke → Webshop → Custom webshop

  order.py  — PDV kalkulacija, stavke i FIRA narudžba (čiste funkcije)
  client.py — slanje narudžbe i dohvat statusa (httpx)
"""

from plexus_portal.core.errors import ConfigurationError, FiraError, IntegrationError
from plexus_portal.modules.fira.order import (
    VAT_RATE,
    Addon,
    BillingInfo,
    InvoiceType,
    LineItem,
    OrderTotals,
    PaymentType,
    RegistrationOrder,
    VatBreakdown,
    build_fira_order,
    build_line_items,
    calculate_vat,
    compute_totals,
)
from plexus_portal.modules.fira.client import FiraClient, FiraInvoiceResult

__all__ = [
    "VAT_RATE", "Addon", "BillingInfo", "InvoiceType", "LineItem", "OrderTotals",
    "PaymentType", "RegistrationOrder", "VatBreakdown",
    "build_fira_order", "build_line_items", "calculate_vat", "compute_totals",
    "FiraClient", "FiraInvoiceResult",
    "ConfigurationError", "FiraError", "IntegrationError",
]
