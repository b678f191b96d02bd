"""
Acceso al documento estructurado de la página.

Envuelve BeautifulSoup con las primitivas que necesita la extracción:
buscar por selector, leer texto, leer atributos y navegar entre nodos.
Todas aceptan None y devuelven None o vacío, de modo que la ausencia de
una estructura nunca lanza excepciones.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class Document:
    """Documento HTML consultable mediante selectores CSS."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Document":
        return cls(BeautifulSoup(html, "html.parser"))

    def find_one(self, selector: str, node: Optional[Tag] = None) -> Optional[Tag]:
        """Primer nodo que coincide con el selector (en todo el documento o bajo `node`)."""
        scope = self.soup if node is None else node
        return scope.select_one(selector)

    def find_all(self, selector: str, node: Optional[Tag] = None) -> List[Tag]:
        scope = self.soup if node is None else node
        return list(scope.select(selector))

    @staticmethod
    def text_content(node: Optional[Tag]) -> str:
        """Texto del nodo sin espacios al inicio ni al final."""
        if node is None:
            return ""
        return node.get_text().strip()

    @staticmethod
    def attribute(node: Optional[Tag], name: str) -> Optional[str]:
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):
            # Atributos multivaluados (class, rel...)
            return " ".join(value)
        return value

    @staticmethod
    def next_sibling(node: Optional[Tag]) -> Optional[Tag]:
        """Siguiente hermano que sea elemento (ignora texto y comentarios)."""
        if node is None:
            return None
        return node.find_next_sibling()

    @staticmethod
    def parent(node: Optional[Tag]) -> Optional[Tag]:
        if node is None or not isinstance(node.parent, Tag):
            return None
        if isinstance(node.parent, BeautifulSoup):
            return None
        return node.parent

    @staticmethod
    def closest_ancestor(node: Optional[Tag], selector: str) -> Optional[Tag]:
        """Ancestro más cercano (incluido el propio nodo) que coincide con el selector."""
        if node is None:
            return None
        return node.css.closest(selector)
