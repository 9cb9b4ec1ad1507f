#!/usr/bin/env python3
"""
CLI para cargar e inspeccionar los datos de la tienda.

Uso:
    python main.py load                   # Cargar y mostrar resumen
    python main.py load -v                # Con logging detallado
    python main.py categories             # Ver categorías del catálogo
    python main.py regions                # Ver regiones
    python main.py comunas metropolitana  # Ver comunas de una región
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from config import get_api_config
from loaders import DataLoader, DataStore, HttpClient

# Configuración de logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_loader(config: Optional[Dict[str, Any]] = None) -> DataLoader:
    """Crea el loader con el cliente HTTP configurado."""
    config = config or get_api_config()
    http = HttpClient(
        base_url=config["base_url"],
        timeout=config["timeout"],
        max_retries=config["max_retries"],
    )
    return DataLoader(http, store_name=config["store_name"])


def load_store(config: Optional[Dict[str, Any]] = None) -> DataStore:
    """
    Carga productos y regiones y devuelve el store poblado.

    Args:
        config: Configuración de la API. Si no se proporciona, se lee
                del entorno.

    Returns:
        Store con los datos cargados (colecciones vacías si la API falla).
    """
    loader = build_loader(config)
    try:
        asyncio.run(loader.initialize())
    finally:
        loader.http.close()
    return loader.store


def cmd_load(args):
    """Comando: load"""
    inicio = datetime.now()
    store = load_store()
    duracion = (datetime.now() - inicio).total_seconds()

    print(f"\nResumen de {store.catalog.store_name}:")
    print("=" * 40)
    print(f"  Productos:  {len(store.products)}")
    print(f"  Categorías: {len(store.catalog.categories)}")
    print(f"  Regiones:   {len(store.regions)}")
    print(f"  Comunas:    {len(store.comunas)}")
    print(f"  Duración:   {duracion:.1f}s")


def cmd_categories(args):
    """Comando: categories"""
    store = load_store()
    catalog = store.catalog

    if not catalog.categories:
        print("No hay categorías disponibles")
        return

    print(f"\nCategorías de {catalog.store_name}:")
    print("=" * 50)

    for category in catalog.categories:
        print(f"\n{category.id}: {category.name} ({category.slug})")
        for product in category.products:
            print(f"  - {product.code}: {product.product_name} (${product.price})")


def cmd_regions(args):
    """Comando: regions"""
    store = load_store()

    if not store.regions:
        print("No hay regiones disponibles")
        return

    print("\nRegiones:")
    print("=" * 50)
    for region in store.regions:
        print(f"  {region.slug}: {region.name} ({len(region.comunas)} comunas)")


def cmd_comunas(args):
    """Comando: comunas"""
    store = load_store()
    region = store.find_region_by_slug(args.region)

    if not region:
        print(f"Error: Región '{args.region}' no encontrada")
        return

    comunas = store.comunas_for_region_slug(args.region)
    print(f"\nComunas de {region.name}:")
    print("=" * 50)
    for comuna in comunas:
        print(f"  - {comuna.id}: {comuna.name}")
    print(f"\nTotal: {len(comunas)} comunas")


def main():
    """Punto de entrada del CLI."""
    parser = argparse.ArgumentParser(
        description="Carga de datos de la tienda",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Mostrar información detallada",
    )

    subparsers = parser.add_subparsers(dest="command", help="Comandos disponibles")

    load_parser = subparsers.add_parser("load", help="Cargar datos y ver resumen")
    load_parser.set_defaults(func=cmd_load)

    categories_parser = subparsers.add_parser(
        "categories", help="Ver categorías del catálogo"
    )
    categories_parser.set_defaults(func=cmd_categories)

    regions_parser = subparsers.add_parser("regions", help="Ver regiones")
    regions_parser.set_defaults(func=cmd_regions)

    comunas_parser = subparsers.add_parser(
        "comunas", help="Ver comunas de una región"
    )
    comunas_parser.add_argument("region", help="Slug de la región")
    comunas_parser.set_defaults(func=cmd_comunas)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

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
