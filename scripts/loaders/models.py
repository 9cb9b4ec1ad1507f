"""
Modelos canónicos de la tienda.

Define las formas normalizadas que el resto de la aplicación consume,
independientes de las variaciones del payload de la API.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]

DEFAULT_STORE_NAME = "Pasteleria Mil Sabores"
DEFAULT_CATEGORY = "sin-categoria"


@dataclass
class Product:
    """Producto normalizado."""

    code: str
    product_name: str
    price: Number
    img: str
    category: str  # Slug de la categoría
    desc: str
    stock: Number
    stock_critico: Number  # Umbral de stock crítico

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_catalog_entry(self) -> Dict[str, Any]:
        """Forma desnormalizada que consumen los listados del catálogo."""
        return {
            "codigo_producto": self.code,
            "nombre_producto": self.product_name,
            "precio_producto": self.price,
            "descripción_producto": self.desc,
            "imagen_producto": self.img,
            "stock": self.stock,
            "stock_critico": self.stock_critico,
        }


@dataclass
class Category:
    """
    Categoría del catálogo.

    Los productos son referencias a las mismas instancias de Product
    que guarda el store, no copias de sus campos.
    """

    id: int
    name: str
    slug: str
    products: List[Product] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id_categoria": self.id,
            "nombre_categoria": self.name,
            "productos": [p.to_catalog_entry() for p in self.products],
        }


@dataclass
class Catalog:
    """Vista del catálogo agrupada por categoría."""

    store_name: str = DEFAULT_STORE_NAME
    categories: List[Category] = field(default_factory=list)

    def get_category(self, slug: str) -> Optional[Category]:
        """Busca una categoría por su slug."""
        for category in self.categories:
            if category.slug == slug:
                return category
        return None

    def product_count(self) -> int:
        return sum(len(c.products) for c in self.categories)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nombre_pasteleria": self.store_name,
            "categorias": [c.to_dict() for c in self.categories],
        }


@dataclass
class Comuna:
    """Comuna (subdivisión de una región)."""

    id: str  # "{region_slug}-{comuna_slug}"
    name: str
    slug: str
    region_id: str
    region_slug: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Region:
    """Región administrativa."""

    id: str
    name: str
    slug: str

    def __str__(self) -> str:
        return self.name


@dataclass
class RegionWithComunas(Region):
    """Región con sus comunas en el orden recibido de la API."""

    comunas: List[Comuna] = field(default_factory=list)

    def to_region(self) -> Region:
        return Region(id=self.id, name=self.name, slug=self.slug)
