"""
Módulo de carga y normalización de datos de la tienda.

Descarga productos y regiones desde la API, los normaliza a los modelos
canónicos y los deja disponibles en un DataStore.
"""

from .catalog import build_catalog
from .http_client import FetchErrorCause, HttpClient
from .models import Catalog, Category, Comuna, Product, Region, RegionWithComunas
from .products import normalize_product, normalize_products
from .regions import flatten_comunas, index_comunas, map_regions
from .slug import slugify
from .store import DataLoader, DataStore, StoreSnapshot

__all__ = [
    "build_catalog",
    "FetchErrorCause",
    "HttpClient",
    "Catalog",
    "Category",
    "Comuna",
    "Product",
    "Region",
    "RegionWithComunas",
    "normalize_product",
    "normalize_products",
    "flatten_comunas",
    "index_comunas",
    "map_regions",
    "slugify",
    "DataLoader",
    "DataStore",
    "StoreSnapshot",
]
