#!/usr/bin/env python3
"""
CLI para procesar páginas de producto pre-renderizadas.

Uso:
    python main.py check pagina.html                     # ¿Es apta para extracción estática?
    python main.py render pagina.html --url URL          # Vista canónica del producto (JSON)
    python main.py render pagina.html --no-fallback      # Sin consultar el servicio de precios
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config import get_graphql_config
from prerender import (
    Document,
    GraphQLClient,
    PageLocation,
    PriceFetchCache,
    SsgOrchestrator,
    check_ssg_page,
)

# Configuración de logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def load_document(path: str) -> Document:
    """Lee un archivo HTML y lo convierte en documento consultable."""
    html = Path(path).read_text(encoding="utf-8")
    return Document.from_html(html)


def build_price_cache() -> Optional[PriceFetchCache]:
    """Crea el cache de precios si hay un endpoint configurado."""
    config = get_graphql_config()

    if not config["endpoint"]:
        logger.warning("PDP_GRAPHQL_ENDPOINT no configurado: sin fallback de precio")
        return None

    client = GraphQLClient(
        endpoint=config["endpoint"],
        headers=config["headers"],
        timeout=config["timeout"],
    )
    return PriceFetchCache(client)


def cmd_check(args):
    """Comando: check"""
    document = load_document(args.file)

    if check_ssg_page(document):
        print(f"{args.file}: apta para extracción estática")
    else:
        print(f"{args.file}: no apta (sin meta sku)")
        sys.exit(1)


def cmd_render(args):
    """Comando: render"""
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    document = load_document(args.file)
    location = PageLocation(args.url) if args.url else None
    price_cache = None if args.no_fallback else build_price_cache()

    orchestrator = SsgOrchestrator(price_cache)
    result = asyncio.run(orchestrator.load_product(document, location))

    if not result.is_resolved:
        logger.error("La página no es apta para extracción estática")
        sys.exit(1)

    if result.price_unavailable:
        logger.warning("Producto sin precio: servicio de precios no disponible")

    print(json.dumps(result.product, indent=2, ensure_ascii=False))


def main():
    """Punto de entrada del CLI."""
    parser = argparse.ArgumentParser(
        description="Procesado de páginas de producto pre-renderizadas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Comandos disponibles")

    # Comando: check
    check_parser = subparsers.add_parser(
        "check", help="Comprobar si la página es apta para extracción estática"
    )
    check_parser.add_argument("file", help="Archivo HTML de la página")
    check_parser.set_defaults(func=cmd_check)

    # Comando: render
    render_parser = subparsers.add_parser(
        "render", help="Obtener la vista canónica del producto"
    )
    render_parser.add_argument("file", help="Archivo HTML de la página")
    render_parser.add_argument(
        "--url",
        metavar="URL",
        help="Dirección de la página (para urlKey, url e imágenes relativas)",
    )
    render_parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="No consultar el servicio remoto si falta el precio",
    )
    render_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Mostrar información detallada",
    )
    render_parser.set_defaults(func=cmd_render)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        logger.warning("Proceso interrumpido por el usuario")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
