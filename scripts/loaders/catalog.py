"""
Construcción del catálogo agrupado por categoría.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from .models import DEFAULT_CATEGORY, DEFAULT_STORE_NAME, Catalog, Category, Product

logger = logging.getLogger(__name__)


def category_label(slug: str) -> str:
    """Nombre legible de una categoría a partir de su slug."""
    return slug.replace("-", " ")


def build_catalog(
    products: Iterable[Product],
    store_name: str = DEFAULT_STORE_NAME,
) -> Catalog:
    """
    Agrupa los productos por categoría.

    Los ids de categoría se asignan desde 1 en el orden en que aparece
    cada categoría por primera vez. Dentro de cada categoría se conserva
    el orden de llegada de los productos. Cada llamada construye un
    catálogo nuevo.

    Args:
        products: Productos normalizados, en orden.
        store_name: Nombre de la tienda mostrado en el catálogo.

    Returns:
        Catálogo con las categorías en orden de aparición.
    """
    categories: Dict[str, Category] = {}
    next_id = 1

    for product in products:
        key = product.category or DEFAULT_CATEGORY
        category = categories.get(key)
        if category is None:
            category = Category(id=next_id, name=category_label(key), slug=key)
            categories[key] = category
            next_id += 1
        category.products.append(product)

    catalog = Catalog(store_name=store_name, categories=list(categories.values()))
    logger.info(
        f"Catálogo construido: {len(catalog.categories)} categorías, "
        f"{catalog.product_count()} productos"
    )
    return catalog
