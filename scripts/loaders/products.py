"""
Normalización de productos.

Convierte los registros crudos de la API (con nombres de campo variables)
al modelo canónico Product. Nunca falla: los campos ausentes o nulos
caen al siguiente alias o al valor por defecto.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, NamedTuple, Tuple

from .models import DEFAULT_CATEGORY, Number, Product
from .slug import slugify

logger = logging.getLogger(__name__)


def to_number(value: Any) -> Number:
    """
    Convierte un valor a número.

    Los textos no numéricos se convierten en NaN en lugar de rechazarse;
    quien consuma el precio debe contemplarlo.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        # Solo la notación decimal: nada de "1_000", "inf" ni dígitos no ASCII
        if "_" in text or not text.isascii():
            return math.nan
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return math.nan
        if math.isinf(number) and text.lstrip("+-") != "Infinity":
            return math.nan
        return number
    return math.nan


def to_text(value: Any) -> str:
    """Convierte un valor a str."""
    return value if isinstance(value, str) else str(value)


class FieldRule(NamedTuple):
    """Regla de resolución de un campo: alias en orden, default y conversión."""

    aliases: Tuple[str, ...]
    default: Any
    transform: Callable[[Any], Any]


# Campo destino -> regla. El primer alias no nulo gana.
PRODUCT_FIELDS: Dict[str, FieldRule] = {
    "code": FieldRule(("codigo_producto", "code", "id"), "", to_text),
    "product_name": FieldRule(
        ("nombre_producto", "productName", "nombre"), "Sin nombre", to_text
    ),
    "price": FieldRule(("precio_producto", "price", "precio"), 0, to_number),
    "img": FieldRule(("imagen_producto", "img", "imagen"), "", to_text),
    "desc": FieldRule(
        ("descripción_producto", "descripcion_producto", "desc"), "", to_text
    ),
    "stock": FieldRule(("stock",), 0, to_number),
    "stock_critico": FieldRule(("stock_critico", "stockCritico"), 0, to_number),
}

# Alias planos de la categoría, tras el objeto anidado `categoria.nombre`
CATEGORY_ALIASES = ("nombre_categoria", "categoria", "category")


def resolve_field(raw: Mapping, rule: FieldRule) -> Any:
    """Devuelve el primer alias no nulo convertido, o el default."""
    for alias in rule.aliases:
        value = raw.get(alias)
        if value is not None:
            return rule.transform(value)
    return rule.transform(rule.default)


def resolve_category_name(raw: Mapping) -> str:
    """
    Obtiene el nombre de la categoría del producto.

    Prioriza `categoria.nombre` cuando la categoría viene como objeto;
    luego los alias planos. Los valores vacíos se ignoran.
    """
    nested = raw.get("categoria")
    if isinstance(nested, Mapping):
        name = nested.get("nombre")
        if name:
            return to_text(name)

    for alias in CATEGORY_ALIASES:
        value = raw.get(alias)
        if value and not isinstance(value, Mapping):
            return to_text(value)

    return DEFAULT_CATEGORY


def normalize_product(raw: Any) -> Product:
    """
    Transforma un producto crudo de la API al modelo canónico.

    Args:
        raw: Registro crudo. Cualquier cosa que no sea un mapping se
             trata como un registro vacío.

    Returns:
        Producto normalizado con todos los campos definidos.
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Registro de producto no es un objeto: {raw!r}")
        raw = {}

    values = {name: resolve_field(raw, rule) for name, rule in PRODUCT_FIELDS.items()}
    category = slugify(resolve_category_name(raw))

    return Product(category=category, **values)


def normalize_products(payload: Any) -> List[Product]:
    """
    Normaliza el payload completo de /productos.

    Args:
        payload: Respuesta de la API. Si no es una lista se trata como vacía.

    Returns:
        Lista de productos en el orden recibido.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        logger.warning(
            f"Payload de productos inesperado ({type(payload).__name__}), se ignora"
        )
        return []

    products = [normalize_product(item) for item in payload]
    logger.info(f"Productos normalizados: {len(products)}")
    return products
