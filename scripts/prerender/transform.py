"""
Transformación del registro extraído al formato que consume el PDP.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .models import PageLocation, RawProductRecord

DEFAULT_CURRENCY = "USD"
VISIBLE_ROLES = ["visible"]

# __typename -> (productType, __typename)
PRODUCT_TYPES: Dict[str, Tuple[str, str]] = {
    "SimpleProductView": ("simple", "SimpleProductView"),
    "ConfigurableProductView": ("configurable", "ConfigurableProductView"),
    "ComplexProductView": ("complex", "ComplexProductView"),
}
DEFAULT_PRODUCT_TYPE = PRODUCT_TYPES["SimpleProductView"]


def get_product_type_values(record: Mapping[str, Any]) -> Tuple[str, str]:
    """Devuelve (productType, __typename); "simple" si no se reconoce."""
    return PRODUCT_TYPES.get(record.get("__typename"), DEFAULT_PRODUCT_TYPE)


def _amount(value: Any, currency: Any) -> Dict[str, Any]:
    return {
        "amount": {
            "value": value or 0,
            "currency": currency or DEFAULT_CURRENCY,
        }
    }


def _price_view(value: Any, currency: Any) -> Dict[str, Any]:
    # La página estática no distingue precio regular y final
    return {
        "roles": list(VISIBLE_ROLES),
        "regular": _amount(value, currency),
        "final": _amount(value, currency),
    }


def _transform_options(options: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {
            "id": option.get("id"),
            "type": option.get("type"),
            "typename": option.get("typename"),
            "title": option.get("title") or option.get("label"),
            "required": option.get("required"),
            "multiple": option.get("multiple"),
            "values": [
                {
                    "id": value.get("id"),
                    "title": value.get("title") or value.get("label"),
                    "value": value.get("value"),
                    "selected": value.get("selected"),
                    "inStock": value.get("inStock"),
                }
                for value in (option.get("values") or option.get("items") or [])
            ],
        }
        for option in options
    ]


def transform_to_pdp_format(
    record: Union[Mapping[str, Any], RawProductRecord],
    location: Optional[PageLocation] = None,
) -> Dict[str, Any]:
    """
    Transforma el registro fusionado al formato del PDP.

    Args:
        record: Registro fusionado (metadatos + campos de la página) o
                RawProductRecord.
        location: Dirección de la página actual, para urlKey y url.

    Returns:
        Diccionario con la vista canónica del producto. Contiene `price`
        o `priceRange` (nunca ambos) cuando hay precio.
    """
    if isinstance(record, RawProductRecord):
        record = record.to_dict()

    transformed: Dict[str, Any] = {
        "name": record.get("name") or record.get("twitter_title"),
        "sku": record.get("sku"),
        "description": record.get("description"),
        "shortDescription": record.get("description"),
        "images": [
            {"url": url, "label": "", "roles": []}
            for url in (record.get("images") or [])
        ],
        "isBundle": False,
        "addToCartAllowed": True,
        "inStock": True,
        "urlKey": location.url_key if location else None,
        "url": location.url if location else None,
    }
    transformed["productType"], transformed["__typename"] = get_product_type_values(record)

    price = record.get("price")
    if price is not None and not isinstance(price, Mapping):
        price = price.to_dict()

    if price and price.get("type") == "range":
        currency = price.get("currency")
        transformed["priceRange"] = {
            "minimum": _price_view(price.get("minimum"), currency),
            "maximum": _price_view(price.get("maximum"), currency),
        }
    elif price:
        transformed["price"] = _price_view(price.get("value"), price.get("currency"))

    options = record.get("options") or []
    if options:
        transformed["options"] = _transform_options(options)

    return transformed
