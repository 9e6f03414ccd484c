"""Reglas de precio: parseo de precios formateados, formato CLP e IVA."""
from __future__ import annotations
import re
from decimal import Decimal, ROUND_HALF_UP

NON_DIGITS = re.compile(r"[^0-9]")

def price_to_number(price: str | None) -> int:
    """Convierte un precio formateado a entero ("$16.990" -> 16990).

    Descarta todo carácter que no sea dígito; vacío equivale a 0.
    """
    digits = NON_DIGITS.sub("", price or "")
    return int(digits) if digits else 0

def format_price(value: int, symbol: str = "$", thousands_sep: str = ".") -> str:
    """Formatea un entero como precio chileno, sin decimales (16990 -> "$16.990")."""
    grouped = f"{int(value):,}".replace(",", thousands_sep)
    return f"{symbol}{grouped}"

def round_half_up(value: Decimal) -> int:
    """Redondeo al entero más cercano, mitades hacia arriba (como Math.round)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def calc_tax(subtotal: int, rate: float) -> int:
    """IVA redondeado a pesos enteros."""
    return round_half_up(Decimal(subtotal) * Decimal(str(rate)))
