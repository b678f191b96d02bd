"""
Extracción de las opciones comprables desde la sección "options".

Cada opción es un <li> con tres párrafos en orden fijo
(etiqueta, id, obligatoria) y una lista anidada de valores, cada uno con
(etiqueta, id, en stock). El orden de las columnas es posicional.
"""

from __future__ import annotations

import logging
from typing import List

from bs4.element import Tag

from .document import Document
from .errors import OptionParseError
from .models import OptionItem, OptionSpec

logger = logging.getLogger(__name__)

OPTION_ROW_SELECTOR = "div:has(#options) > div > ul > li"
OPTION_ITEM_SELECTOR = "ul > li"
COLUMN_SELECTOR = ":scope > p"
COLUMN_COUNT = 3


def _read_columns(document: Document, node: Tag) -> List[str]:
    columns = [document.text_content(p) for p in document.find_all(COLUMN_SELECTOR, node)]
    if len(columns) < COLUMN_COUNT:
        raise OptionParseError(
            f"Se esperaban {COLUMN_COUNT} columnas, encontradas {len(columns)}",
            columns=len(columns),
        )
    return columns[:COLUMN_COUNT]


def parse_option_item(document: Document, node: Tag) -> OptionItem:
    """Construye un valor de opción a partir de (etiqueta, id, en stock)."""
    label, item_id, in_stock = _read_columns(document, node)
    return OptionItem(id=item_id, label=label, value=item_id, in_stock=in_stock)


def parse_option_row(document: Document, node: Tag) -> OptionSpec:
    """
    Construye una opción a partir de (etiqueta, id, obligatoria) y sus valores.

    Los valores incompletos se descartan sin descartar la opción.

    Raises:
        OptionParseError: Si la fila no tiene las tres columnas.
    """
    label, option_id, required = _read_columns(document, node)
    option = OptionSpec(id=option_id, label=label, required=required)

    for item_node in document.find_all(OPTION_ITEM_SELECTOR, node):
        try:
            option.items.append(parse_option_item(document, item_node))
        except OptionParseError as e:
            logger.warning(f"Valor de opción descartado ({option_id}): {e}")

    return option


def parse_options(document: Document, root: Tag) -> List[OptionSpec]:
    """
    Obtiene la lista de opciones del producto.

    Args:
        document: Documento de la página.
        root: Contenedor de detalles del producto.

    Returns:
        Lista de opciones (vacía si no hay sección de opciones).
    """
    options: List[OptionSpec] = []

    for row in document.find_all(OPTION_ROW_SELECTOR, root):
        try:
            options.append(parse_option_row(document, row))
        except OptionParseError as e:
            logger.warning(f"Opción descartada: {e}")

    logger.debug(f"Opciones encontradas: {len(options)}")
    return options
