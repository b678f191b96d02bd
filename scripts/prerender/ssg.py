"""
Orquestación del pre-renderizado de la página de producto.

Detecta si la página estática es apta para extracción, extrae los datos,
resuelve el precio (de la página o, si falta, del servicio remoto) y
produce la vista canónica del producto.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .document import Document
from .errors import PriceServiceUnavailable
from .extractor import DocumentExtractor
from .models import PageLocation, ParsedPrice, RangePrice, SimplePrice
from .price_cache import PriceFetchCache
from .price_parser import parse_price
from .transform import transform_to_pdp_format

logger = logging.getLogger(__name__)


class SsgState(str, Enum):
    NOT_ELIGIBLE = "not_eligible"
    EXTRACTING = "extracting"
    RESOLVED = "resolved"


@dataclass
class SsgResult:
    """Resultado de procesar una página."""

    state: SsgState
    record: Optional[Dict[str, Any]] = None
    product: Optional[Dict[str, Any]] = None
    price_source: Optional[str] = None  # page, remote
    price_unavailable: bool = False

    @property
    def is_resolved(self) -> bool:
        return self.state is SsgState.RESOLVED


def get_page_sku(document: Document) -> Optional[str]:
    """SKU del primer <meta name="sku">, recortado; None si falta o está vacío."""
    meta_sku = document.find_one('meta[name="sku"]')
    content = (document.attribute(meta_sku, "content") or "").strip()
    return content or None


def check_ssg_page(document: Document) -> bool:
    """True si la página tiene un <meta name="sku"> con contenido."""
    return get_page_sku(document) is not None


def _min_amount(price_view: Dict[str, Any]) -> float:
    return min(
        price_view["regular"]["amount"]["value"],
        price_view["final"]["amount"]["value"],
    )


def price_from_remote(product: Optional[Dict[str, Any]]) -> Optional[ParsedPrice]:
    """
    Reduce el precio remoto al formato de la página.

    Toma el mínimo entre precio regular y final; en rangos, por separado
    para el mínimo y el máximo.

    Returns:
        Precio o None si el producto no trae precio utilizable.
    """
    if not product:
        return None

    try:
        price_range = product.get("priceRange")
        if price_range:
            return RangePrice(
                minimum=_min_amount(price_range["minimum"]),
                maximum=_min_amount(price_range["maximum"]),
                currency=price_range["minimum"]["regular"]["amount"]["currency"],
            )

        price = product.get("price")
        if price:
            return SimplePrice(
                value=_min_amount(price),
                currency=price["regular"]["amount"]["currency"],
            )

    except (KeyError, TypeError) as e:
        logger.warning(f"Precio remoto con formato inesperado: {e}")

    return None


class SsgOrchestrator:
    """
    Convierte la página estática en la vista canónica del producto.

    El último registro fusionado queda en `self.record` y el último
    producto resuelto en `self.product`.
    """

    PAGE = "page"
    REMOTE = "remote"

    def __init__(self, price_cache: Optional[PriceFetchCache] = None):
        """
        Inicializa el orquestador.

        Args:
            price_cache: Cache de precios remotos. Si no se proporciona,
                         no hay fallback remoto.
        """
        self.price_cache = price_cache
        self.record: Optional[Dict[str, Any]] = None
        self.product: Optional[Dict[str, Any]] = None
        self.state = SsgState.NOT_ELIGIBLE

    async def _resolve(
        self,
        document: Document,
        location: Optional[PageLocation],
    ) -> SsgResult:
        extractor = DocumentExtractor(document, location)
        details = extractor.product_details()
        sku = get_page_sku(document)

        if details is None or sku is None:
            logger.info("Página no apta para extracción estática")
            self.state = SsgState.NOT_ELIGIBLE
            return SsgResult(state=self.state)

        self.state = SsgState.EXTRACTING
        record = extractor.extract()
        # El SKU validado (primer meta) prevalece sobre metas repetidos
        record.metadata["sku"] = sku
        result = SsgResult(state=self.state)

        record.price = parse_price(extractor.extract_price_text(details))
        if record.price is not None:
            result.price_source = self.PAGE
        elif self.price_cache is not None:
            logger.info(f"Sin precio en la página, consultando servicio remoto: {sku}")
            try:
                remote = await self.price_cache.get(sku)
            except (PriceServiceUnavailable, ValueError) as e:
                logger.warning(f"Servicio de precios no disponible: {e}")
                result.price_unavailable = True
            else:
                record.price = price_from_remote(remote)
                if record.price is not None:
                    result.price_source = self.REMOTE

        result.record = record.to_dict()
        self.record = result.record
        return result

    async def parse_ssg_data(
        self,
        document: Document,
        location: Optional[PageLocation] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Extrae el registro fusionado de la página.

        El registro queda también en `self.record`.

        Returns:
            Metadatos + campos de la página, o None si no es apta.
        """
        result = await self._resolve(document, location)
        if result.record is not None:
            self.state = SsgState.RESOLVED
        return result.record

    async def load_product(
        self,
        document: Document,
        location: Optional[PageLocation] = None,
    ) -> SsgResult:
        """
        Procesa la página completa hasta la vista canónica del producto.

        Args:
            document: Documento de la página.
            location: Dirección de la página actual.

        Returns:
            Resultado con estado NOT_ELIGIBLE (el llamador debe usar la
            carga dinámica) o RESOLVED con el registro y el producto.
        """
        result = await self._resolve(document, location)
        if result.record is None:
            return result

        self.product = transform_to_pdp_format(result.record, location)
        self.state = SsgState.RESOLVED
        result.state = self.state
        result.product = self.product

        logger.info(
            f"Producto resuelto: {result.record.get('sku')} "
            f"(precio: {result.price_source or 'sin precio'})"
        )
        return result
