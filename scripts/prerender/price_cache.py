"""
Cache de precios remotos por SKU.

La primera petición de un SKU lanza la consulta remota y guarda la tarea
en curso; las peticiones posteriores (concurrentes o no) esperan esa
misma tarea. El resultado se guarda para toda la vida del proceso,
incluida la ausencia de producto y el fallo del servicio.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from .graphql_client import GraphQLClient

logger = logging.getLogger(__name__)


class PriceFetchCache:
    """Cache single-flight alrededor de GraphQLClient.fetch_product_price."""

    def __init__(self, client: GraphQLClient):
        self.client = client
        self._entries: Dict[str, asyncio.Task] = {}

    def __contains__(self, sku: str) -> bool:
        return sku.upper() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, sku: str) -> Optional[Dict[str, Any]]:
        """
        Obtiene el precio remoto de un SKU.

        Args:
            sku: SKU del producto (no distingue mayúsculas).

        Returns:
            Primer producto de la respuesta o None si no existe.

        Raises:
            ValueError: Si el SKU está vacío.
            PriceServiceUnavailable: Si el servicio falló en la primera consulta.
        """
        if not sku:
            raise ValueError("SKU vacío")

        key = sku.upper()
        task = self._entries.get(key)

        if task is None:
            logger.debug(f"Cache miss: {key}")
            # Se registra antes de cualquier await
            task = asyncio.ensure_future(self._fetch(key))
            self._entries[key] = task
        else:
            logger.debug(f"Cache hit: {key}")

        return await asyncio.shield(task)

    async def _fetch(self, sku: str) -> Optional[Dict[str, Any]]:
        data = await asyncio.to_thread(self.client.fetch_product_price, sku)
        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list) or not products or not isinstance(products[0], dict):
            logger.info(f"Producto sin precio remoto: {sku}")
            return None
        return products[0]

    def clear(self) -> None:
        """Limpia el cache en memoria."""
        self._entries.clear()
        logger.debug("Cache limpiado")
