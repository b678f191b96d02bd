"""
Cliente GraphQL para el servicio remoto de precios.

Capa fina sobre requests con:
- Timeout configurable
- Headers de la tienda (entorno, store view, api key...)
- Logging de errores GraphQL
- Error distinguible cuando el servicio no es alcanzable

No reintenta: la consulta de precio es un fallback puntual.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .errors import PriceServiceUnavailable
from .queries import PRODUCT_PRICE_QUERY

logger = logging.getLogger(__name__)


class GraphQLClient:
    """Cliente HTTP para consultas GraphQL."""

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: int = 30,
    ):
        """
        Inicializa el cliente GraphQL.

        Args:
            endpoint: URL del servicio GraphQL.
            headers: Headers adicionales para las peticiones.
            timeout: Timeout por request en segundos.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Ejecuta una consulta GraphQL.

        Args:
            query: Texto de la consulta.
            variables: Variables de la consulta.

        Returns:
            Contenido de "data" de la respuesta (puede ser None).

        Raises:
            PriceServiceUnavailable: Si falla la conexión, hay timeout, el
                status no es 2xx o la respuesta no es un objeto JSON.
        """
        payload = {"query": query, "variables": variables or {}}

        try:
            logger.debug(f"POST {self.endpoint} variables={payload['variables']}")
            response = self.session.post(
                self.endpoint,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()

        except requests.Timeout as e:
            logger.error(f"Timeout en {self.endpoint}")
            raise PriceServiceUnavailable(f"Timeout en {self.endpoint}") from e

        except requests.RequestException as e:
            logger.error(f"Error en POST {self.endpoint}: {e}")
            raise PriceServiceUnavailable(str(e)) from e

        except ValueError as e:
            logger.error(f"Respuesta no JSON de {self.endpoint}")
            raise PriceServiceUnavailable("Respuesta no JSON") from e

        if not isinstance(body, dict):
            logger.error(f"Respuesta inesperada de {self.endpoint}: {type(body).__name__}")
            raise PriceServiceUnavailable("Respuesta inesperada")

        errors = body.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            logger.warning(f"Errores GraphQL: {messages}")

        data = body.get("data")
        if data is not None and not isinstance(data, dict):
            logger.error(f"Campo data inesperado en {self.endpoint}: {type(data).__name__}")
            raise PriceServiceUnavailable("Respuesta inesperada")
        return data

    def fetch_product_price(self, sku: str) -> Optional[Dict[str, Any]]:
        """Consulta el precio (simple o rango) de un SKU."""
        return self.execute(PRODUCT_PRICE_QUERY, {"sku": sku})
