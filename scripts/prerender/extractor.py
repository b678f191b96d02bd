"""
Extracción de los datos del producto desde la página pre-renderizada.

La página estática publica cada sección del producto como un encabezado
<h2 id="..."> seguido del bloque con el contenido:

    <div class="product-details">
      <h1>Nombre</h1>
      <div><div><h2 id="images">...</h2></div><div><ul><li><img src=...></li></ul></div></div>
      <div><div><h2 id="description">...</h2></div><div>Texto</div></div>
      <div><div><h2 id="price">...</h2></div><div>$12.50</div></div>
      <div><div><h2 id="options">...</h2></div><div><ul><li>...</li></ul></div></div>
    </div>
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional
from urllib.parse import urljoin

from bs4.element import Tag

from .document import Document
from .models import PageLocation, RawProductRecord
from .options import parse_options

logger = logging.getLogger(__name__)


class DocumentExtractor:
    """Lee nombre, imágenes, descripción, opciones y metadatos de la página."""

    PRODUCT_DETAILS_SELECTOR = ".product-details"

    def __init__(self, document: Document, location: Optional[PageLocation] = None):
        """
        Inicializa el extractor.

        Args:
            document: Documento de la página.
            location: Dirección de la página, para resolver URLs relativas
                      de las imágenes.
        """
        self.document = document
        self.location = location

    def product_details(self) -> Optional[Tag]:
        return self.document.find_one(self.PRODUCT_DETAILS_SELECTOR)

    def extract_metadata(self) -> Dict[str, str]:
        """Vuelca todos los <meta name=...> a un diccionario nombre -> contenido."""
        metadata: Dict[str, str] = {}
        for tag in self.document.find_all("meta[name]"):
            key = self.document.attribute(tag, "name")
            metadata[key] = self.document.attribute(tag, "content") or ""
        return metadata

    def extract_name(self, details: Tag) -> Optional[str]:
        heading = self.document.find_one("h1", details)
        if heading is None:
            return None
        return self.document.text_content(heading)

    def extract_images(self, details: Tag) -> List[str]:
        """Fuentes de las imágenes de la lista que sigue al encabezado "images"."""
        doc = self.document
        heading = doc.find_one("h2#images", details)
        container = doc.next_sibling(doc.closest_ancestor(heading, "div"))
        images_list = doc.find_one("ul", container) if container is not None else None
        if images_list is None:
            logger.debug("Sin lista de imágenes en la página")
            return []

        images = []
        for img in doc.find_all("li img", images_list):
            src = doc.attribute(img, "src")
            if not src:
                continue
            if self.location is not None:
                src = urljoin(self.location.url, src)
            images.append(src)
        return images

    def extract_description(self, details: Tag) -> Optional[str]:
        doc = self.document
        heading_div = doc.parent(doc.find_one("h2#description", details))
        description_div = doc.next_sibling(heading_div)
        if description_div is None:
            return None
        return doc.text_content(description_div)

    def extract_price_text(self, details: Tag) -> Optional[str]:
        """Texto recortado del bloque de precio, o None si no existe."""
        doc = self.document
        heading = doc.find_one("h2#price", details)
        price_div = doc.next_sibling(doc.closest_ancestor(heading, "div"))
        if price_div is None:
            return None
        return doc.text_content(price_div) or None

    def extract(self) -> Optional[RawProductRecord]:
        """
        Construye el registro crudo del producto.

        Returns:
            Registro sin precio (lo resuelve el orquestador) o None si la
            página no tiene contenedor de detalles del producto.
        """
        details = self.product_details()
        if details is None:
            logger.debug("La página no tiene contenedor .product-details")
            return None

        return RawProductRecord(
            name=self.extract_name(details),
            images=self.extract_images(details),
            description=self.extract_description(details),
            options=parse_options(self.document, details),
            metadata=self.extract_metadata(),
        )
