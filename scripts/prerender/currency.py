"""
Resolución de moneda a partir del texto de un precio.
"""

from __future__ import annotations

import unicodedata
from typing import Dict, Optional

# Símbolo de moneda -> código ISO 4217
CURRENCY_SYMBOL_TO_CODE: Dict[str, str] = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
    "₹": "INR",
    "₩": "KRW",
    "₽": "RUB",
    "₫": "VND",
    "₪": "ILS",
    "₱": "PHP",
    "฿": "THB",
    "₦": "NGN",
    "₴": "UAH",
    "₭": "LAK",
    "₲": "PYG",
    "₡": "CRC",
    "₵": "GHS",
}

# Sin símbolo en el texto (distinto de None: símbolo encontrado pero desconocido)
NO_CURRENCY = ""


def find_currency_symbol(text: Optional[str]) -> Optional[str]:
    """Devuelve el primer carácter de categoría Unicode 'Sc' del texto."""
    if not text:
        return None
    for char in text:
        if unicodedata.category(char) == "Sc":
            return char
    return None


def resolve_currency(text: Optional[str]) -> Optional[str]:
    """
    Obtiene el código de moneda del texto de un precio.

    Args:
        text: Texto del precio, p. ej. "$12.50".

    Returns:
        Código ISO si el símbolo es conocido, None si hay símbolo pero no
        está en la tabla, o NO_CURRENCY ("") si no hay ningún símbolo.
    """
    symbol = find_currency_symbol(text)
    if symbol is None:
        return NO_CURRENCY
    return CURRENCY_SYMBOL_TO_CODE.get(symbol)
