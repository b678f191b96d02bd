"""
Normalización del texto de precio de la página estática.

Distingue entre precio simple ("$12.50") y rango ("$10 - $20").
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .currency import resolve_currency
from .models import ParsedPrice, RangePrice, SimplePrice

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def to_number(text: str) -> Optional[float]:
    """
    Convierte un fragmento de precio a float.

    Elimina todo lo que no sea dígito o punto y lee el prefijo numérico
    más largo ("1.2.3" -> 1.2). Devuelve None si no queda un número.
    """
    cleaned = _NON_NUMERIC.sub("", text)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def parse_price(text: Optional[str]) -> Optional[ParsedPrice]:
    """
    Extrae un precio normalizado del texto.

    Args:
        text: Texto del bloque de precio, ya recortado.

    Returns:
        SimplePrice, RangePrice o None si el texto no contiene un precio.
    """
    if not text:
        return None

    currency = resolve_currency(text)

    if "-" in text:
        segments = text.split("-")
        minimum = to_number(segments[0])
        maximum = to_number(segments[1])
        if minimum is None or maximum is None:
            logger.debug(f"Rango de precio no numérico: {text!r}")
            return None
        return RangePrice(minimum=minimum, maximum=maximum, currency=currency)

    value = to_number(text)
    if value is None:
        logger.debug(f"Precio no numérico: {text!r}")
        return None

    return SimplePrice(value=value, currency=currency)
