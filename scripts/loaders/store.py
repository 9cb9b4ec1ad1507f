"""
Estado de la tienda y orquestación de la carga inicial.

DataStore guarda el último snapshot calculado y expone accesos de lectura.
DataLoader descarga productos y regiones, los normaliza y publica un
snapshot nuevo en un solo paso.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol

from .catalog import build_catalog
from .models import DEFAULT_STORE_NAME, Catalog, Comuna, Product, Region, RegionWithComunas
from .products import normalize_products
from .regions import flatten_comunas, index_comunas, map_regions

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/productos"
REGIONS_PATH = "/regiones-comunas"


class JsonClient(Protocol):
    """Cliente capaz de hacer GET de JSON; devuelve None si falla."""

    def get(self, path: str) -> Optional[Any]: ...


@dataclass(frozen=True)
class StoreSnapshot:
    """Estado completo de la tienda en un instante. No se modifica tras publicarse."""

    products: List[Product] = field(default_factory=list)
    catalog: Catalog = field(default_factory=Catalog)
    regions: List[RegionWithComunas] = field(default_factory=list)
    comunas: List[Comuna] = field(default_factory=list)
    comunas_by_region_slug: Dict[str, List[Comuna]] = field(default_factory=dict)

    @classmethod
    def empty(cls, store_name: str = DEFAULT_STORE_NAME) -> "StoreSnapshot":
        return cls(catalog=Catalog(store_name=store_name))


class DataStore:
    """
    Estado de la tienda con accesos de lectura.

    Antes de la carga expone colecciones vacías y un catálogo sin
    categorías; nunca queda a medio escribir.
    """

    def __init__(self, store_name: str = DEFAULT_STORE_NAME):
        self._snapshot = StoreSnapshot.empty(store_name)

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    def _publish(self, snapshot: StoreSnapshot) -> None:
        """Reemplaza el estado completo. Solo lo llama DataLoader.initialize."""
        self._snapshot = snapshot

    @property
    def products(self) -> List[Product]:
        return self._snapshot.products

    @property
    def catalog(self) -> Catalog:
        return self._snapshot.catalog

    @property
    def regions(self) -> List[RegionWithComunas]:
        return self._snapshot.regions

    @property
    def comunas(self) -> List[Comuna]:
        return self._snapshot.comunas

    @property
    def comunas_by_region_slug(self) -> Dict[str, List[Comuna]]:
        return self._snapshot.comunas_by_region_slug

    def find_region_by_slug(self, slug: str) -> Optional[Region]:
        """Busca una región por slug (None si no existe)."""
        for region in self._snapshot.regions:
            if region.slug == slug:
                return region
        return None

    def comunas_for_region_slug(self, slug: str) -> List[Comuna]:
        """Comunas de una región; lista vacía si el slug no existe."""
        return self._snapshot.comunas_by_region_slug.get(slug, [])

    def find_product_by_code(self, code: str) -> Optional[Product]:
        """Primer producto con ese código (los códigos no se deduplican)."""
        for product in self._snapshot.products:
            if product.code == code:
                return product
        return None


class DataLoader:
    """Orquesta la carga de productos y regiones hacia un DataStore."""

    def __init__(
        self,
        http_client: JsonClient,
        store: Optional[DataStore] = None,
        store_name: str = DEFAULT_STORE_NAME,
    ):
        """
        Inicializa el loader.

        Args:
            http_client: Cliente para la API. Debe devolver None si falla.
            store: Store a poblar. Si no se proporciona, se crea uno vacío.
            store_name: Nombre de la tienda para el catálogo.
        """
        self.http = http_client
        self.store_name = store_name
        self.store = store or DataStore(store_name)

    async def initialize(self) -> None:
        """
        Descarga y normaliza productos y regiones, y publica el resultado.

        Ambas cargas corren en paralelo y un fallo en una no afecta a la
        otra: la colección afectada queda vacía.
        """
        logger.info("Iniciando carga de datos...")

        products, regions = await asyncio.gather(
            self._load(PRODUCTS_PATH, normalize_products),
            self._load(REGIONS_PATH, map_regions),
        )

        snapshot = StoreSnapshot(
            products=products,
            catalog=build_catalog(products, store_name=self.store_name),
            regions=regions,
            comunas=flatten_comunas(regions),
            comunas_by_region_slug=index_comunas(regions),
        )
        self.store._publish(snapshot)

        logger.info(
            f"Carga completa: {len(snapshot.products)} productos, "
            f"{len(snapshot.catalog.categories)} categorías, "
            f"{len(snapshot.regions)} regiones, {len(snapshot.comunas)} comunas"
        )

    async def _load(self, path: str, mapper: Callable[[Any], List[Any]]) -> List[Any]:
        """Descarga un recurso y lo mapea; ante cualquier fallo devuelve []."""
        try:
            payload = await asyncio.to_thread(self.http.get, path)
            if payload is None:
                logger.warning(f"Sin datos de {path}, se usa una colección vacía")
                return []
            return mapper(payload)
        except Exception as e:
            logger.error(f"Error al cargar {path}: {e}")
            return []
