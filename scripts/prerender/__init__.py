"""
Módulo de pre-renderizado de la página de producto.

Reconstruye la vista del producto desde la página estática y recurre al
servicio remoto solo cuando la página no publica el precio.
"""

from .currency import resolve_currency
from .document import Document
from .errors import OptionParseError, PrerenderError, PriceServiceUnavailable
from .extractor import DocumentExtractor
from .graphql_client import GraphQLClient
from .models import OptionItem, OptionSpec, PageLocation, RangePrice, RawProductRecord, SimplePrice
from .options import parse_options
from .price_cache import PriceFetchCache
from .price_parser import parse_price
from .ssg import SsgOrchestrator, SsgResult, SsgState, check_ssg_page
from .transform import transform_to_pdp_format

__all__ = [
    "Document",
    "DocumentExtractor",
    "GraphQLClient",
    "OptionItem",
    "OptionParseError",
    "OptionSpec",
    "PageLocation",
    "PrerenderError",
    "PriceFetchCache",
    "PriceServiceUnavailable",
    "RangePrice",
    "RawProductRecord",
    "SimplePrice",
    "SsgOrchestrator",
    "SsgResult",
    "SsgState",
    "check_ssg_page",
    "parse_options",
    "parse_price",
    "resolve_currency",
    "transform_to_pdp_format",
]
