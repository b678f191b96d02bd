"""
Modelos de datos para el pre-renderizado de la página de producto.

Define los registros intermedios que produce la extracción del documento
antes de transformarlos al formato del PDP.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse


@dataclass
class SimplePrice:
    """Precio único."""

    value: float
    currency: Optional[str]
    type: str = field(default="simple", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value, "currency": self.currency}


@dataclass
class RangePrice:
    """
    Rango de precios.

    `minimum` y `maximum` respetan el orden del texto, no se reordenan.
    """

    minimum: float
    maximum: float
    currency: Optional[str]
    type: str = field(default="range", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "currency": self.currency,
        }


ParsedPrice = Union[SimplePrice, RangePrice]


@dataclass
class OptionItem:
    """Valor seleccionable de una opción."""

    id: str
    label: str
    value: str
    in_stock: str
    selected: str = "false"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "value": self.value,
            "selected": self.selected,
            "inStock": self.in_stock,
        }


@dataclass
class OptionSpec:
    """Opción comprable del producto (talla, color...)."""

    id: str
    label: str
    required: str
    items: List[OptionItem] = field(default_factory=list)
    type: str = "dropdown"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "label": self.label,
            "required": self.required,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class PageLocation:
    """Dirección de la página actual."""

    url: str

    @property
    def pathname(self) -> str:
        return urlparse(self.url).path

    @property
    def url_key(self) -> Optional[str]:
        """Segundo segmento de la ruta: /products/<url_key>/<sku>."""
        parts = self.pathname.split("/")
        if len(parts) > 2 and parts[2]:
            return parts[2]
        return None


@dataclass
class RawProductRecord:
    """
    Datos crudos de un producto tal como vienen de la página estática.

    Se construye una vez por página y se descarta tras la transformación.
    """

    name: Optional[str] = None
    images: List[str] = field(default_factory=list)
    description: Optional[str] = None
    options: List[OptionSpec] = field(default_factory=list)
    price: Optional[ParsedPrice] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def sku(self) -> Optional[str]:
        return self.metadata.get("sku")

    def to_dict(self) -> Dict[str, Any]:
        """
        Fusiona metadatos y campos extraídos en un solo diccionario.

        Los campos extraídos ganan en caso de colisión de claves.
        """
        page_data: Dict[str, Any] = {
            "name": self.name,
            "images": list(self.images),
            "description": self.description,
            "options": [option.to_dict() for option in self.options],
        }
        if self.price is not None:
            page_data["price"] = self.price.to_dict()

        return {**self.metadata, **page_data}

