"""
Plexus Portal — FIRA narudžba iz registracije

Registracija (kotizacija + dodaci) → FIRA WebshopOrderModel.
Cijene na registraciji su bruto (PDV 25% uključen):
  netto = brutto / 1.25
  taxValue = brutto - netto

Totali narudžbe se zbrajaju iz VEĆ zaokruženih stavki pa se još jednom
zaokružuju. To može odstupati za cent od zaokruživanja nezaokružene sume
i tako se i šalje FIRA-i.
"""

from decimal import Decimal, ROUND_HALF_UP
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger("plexus_portal.fira.order")

VAT_RATE = Decimal("0.25")  # PDV RH 25%
VAT_RATE_PERCENT = Decimal("25")
CURRENCY = "EUR"
DEFAULT_EVENT_NAME = "Plexus 2026"

_CENT = Decimal("0.01")


def _d(val) -> Decimal:
    """Convert to Decimal for precise money calculations."""
    if isinstance(val, Decimal):
        return val
    if isinstance(val, float):
        return Decimal(str(val))
    return Decimal(str(val) if val else "0")


def _q2(val) -> Decimal:
    """Half-up na 2 decimale."""
    return _d(val).quantize(_CENT, rounding=ROUND_HALF_UP)


def _r2(val) -> float:
    """Round Decimal to 2 places and return float for JSON compat."""
    return float(_q2(val))


# ═══════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════

class InvoiceType(str, Enum):
    """Tip dokumenta u FIRA-i."""
    FISCAL = "FISKALNI_RAČUN"   # Fiskalizira se (Porezna uprava)
    REGULAR = "RAČUN"


class PaymentType(str, Enum):
    """Način plaćanja u FIRA-i."""
    BANK_TRANSFER = "TRANSAKCIJSKI"
    CARD = "KARTICA"
    CASH = "GOTOVINA"


# ═══════════════════════════════════════════
# DATA MODELS
# ═══════════════════════════════════════════

@dataclass
class Addon:
    """Dodatak uz kotizaciju (gala večera, radionica...)."""
    name: str
    price: Decimal = Decimal("0")

    def __post_init__(self):
        self.price = _d(self.price)


@dataclass
class BillingInfo:
    name: str = ""
    company: Optional[str] = None
    address: str = ""
    city: str = ""
    zip: str = ""
    country: str = "HR"
    tax_id: Optional[str] = None       # OIB
    vat_number: Optional[str] = None
    email: str = ""


@dataclass
class RegistrationOrder:
    """Podaci registracije potrebni za račun."""
    invoice_number: str                # PLX26-XXXXXX
    ticket_name: str
    ticket_price: Decimal
    billing: BillingInfo = field(default_factory=BillingInfo)
    addons: List[Addon] = field(default_factory=list)
    invoice_type: Optional[InvoiceType] = None
    payment_type: Optional[PaymentType] = None

    def __post_init__(self):
        self.ticket_price = _d(self.ticket_price)


@dataclass(frozen=True)
class VatBreakdown:
    net: Decimal
    tax: Decimal
    gross: Decimal


@dataclass
class LineItem:
    """Stavka računa. Svi iznosi su već zaokruženi na 2 decimale."""
    description: str
    unit_price_net: Decimal
    net_amount: Decimal
    tax_amount: Decimal
    gross_amount: Decimal
    quantity: int = 1
    tax_rate_percent: Decimal = VAT_RATE_PERCENT

    def to_fira(self) -> Dict[str, Any]:
        # FIRA očekuje stopu kao udio (0.25), ne postotak
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unitPrice": _r2(self.unit_price_net),
            "taxRate": float(self.tax_rate_percent / Decimal("100")),
            "netto": _r2(self.net_amount),
            "taxValue": _r2(self.tax_amount),
            "brutto": _r2(self.gross_amount),
        }


@dataclass(frozen=True)
class OrderTotals:
    net: Decimal = Decimal("0.00")
    tax: Decimal = Decimal("0.00")
    gross: Decimal = Decimal("0.00")


# ═══════════════════════════════════════════
# PDV KALKULACIJA
# ═══════════════════════════════════════════

def calculate_vat(gross) -> VatBreakdown:
    """Razlomi bruto iznos na osnovicu i PDV (25% uključen u cijenu)."""
    gross = _d(gross)
    net = _q2(gross / (1 + VAT_RATE))
    tax = _q2(gross - net)
    return VatBreakdown(net=net, tax=tax, gross=gross)


def _line_item(description: str, gross) -> LineItem:
    vat = calculate_vat(gross)
    return LineItem(
        description=description,
        unit_price_net=vat.net,
        net_amount=vat.net,
        tax_amount=vat.tax,
        gross_amount=vat.gross,
    )


def build_line_items(ticket_name: str, ticket_price, addons: Optional[Iterable] = None,
                     event_name: str = DEFAULT_EVENT_NAME) -> List[LineItem]:
    """Kotizacija pa dodaci, redom. Stavke s cijenom 0 se preskaču."""
    items = []

    if _d(ticket_price) > 0:
        items.append(_line_item(f"{event_name} Conference — {ticket_name}", ticket_price))

    for addon in addons or []:
        if isinstance(addon, dict):
            addon = Addon(name=addon.get("name", ""), price=addon.get("price", 0))
        if _d(addon.price) > 0:
            items.append(_line_item(f"{event_name} — {addon.name}", addon.price))

    return items


def compute_totals(line_items: Iterable[LineItem]) -> OrderTotals:
    """Suma zaokruženih stavki, ponovno zaokružena."""
    net = tax = gross = Decimal("0")
    for item in line_items:
        net += item.net_amount
        tax += item.tax_amount
        gross += item.gross_amount
    return OrderTotals(net=_q2(net), tax=_q2(tax), gross=_q2(gross))


def _wire_value(enum_cls, value, default: Enum) -> str:
    """Wire vrijednost ("KARTICA") ili naziv člana ("CARD"); nepoznato ide kako je zadano."""
    if not value:
        return default.value
    if isinstance(value, enum_cls):
        return value.value
    try:
        return enum_cls(value).value
    except ValueError:
        pass
    try:
        return enum_cls[str(value).upper()].value
    except KeyError:
        logger.warning("Nepoznat %s: %r — šalje se bez mapiranja", enum_cls.__name__, value)
        return str(value)


def build_fira_order(order: RegistrationOrder,
                     event_name: str = DEFAULT_EVENT_NAME) -> Dict[str, Any]:
    """Mapiraj registraciju na FIRA WebshopOrderModel (JSON-ready dict)."""
    line_items = build_line_items(order.ticket_name, order.ticket_price, order.addons,
                                  event_name=event_name)
    totals = compute_totals(line_items)
    billing = order.billing
    invoice_type = _wire_value(InvoiceType, order.invoice_type, InvoiceType.FISCAL)
    payment_type = _wire_value(PaymentType, order.payment_type, PaymentType.BANK_TRANSFER)

    logger.debug("FIRA narudžba %s: %d stavki, brutto %s",
                 order.invoice_number, len(line_items), totals.gross)

    return {
        "externalId": order.invoice_number,
        "invoiceType": invoice_type,
        "paymentType": payment_type,
        "currency": CURRENCY,
        "lineItems": [item.to_fira() for item in line_items],
        "netto": _r2(totals.net),
        "taxValue": _r2(totals.tax),
        "brutto": _r2(totals.gross),
        "billingAddress": {
            "name": billing.company or billing.name or "",
            "street": billing.address or "",
            "city": billing.city or "",
            "zip": billing.zip or "",
            "country": billing.country or "HR",
            "oib": billing.tax_id or "",
            "vatNumber": billing.vat_number or "",
        },
        "customerEmail": billing.email or "",
        "note": f"{event_name} Conference Registration — {order.invoice_number}",
    }
