"""
Mapeo de regiones y comunas.

Convierte el payload de /regiones-comunas a los modelos canónicos y
construye el índice de comunas por slug de región.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from .models import Comuna, RegionWithComunas
from .slug import slugify

logger = logging.getLogger(__name__)


def _comuna_name(raw: Any) -> str:
    """Nombre de una comuna: texto plano u objeto con `nombre`."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Mapping):
        name = raw.get("nombre")
        return "" if name is None else str(name)
    return "" if raw is None else str(raw)


def map_comuna(raw: Any, region_id: str, region_slug: str) -> Comuna:
    """Mapea una comuna cruda dentro de su región."""
    name = _comuna_name(raw)
    slug = slugify(name)
    return Comuna(
        id=f"{region_slug}-{slug}",
        name=name,
        slug=slug,
        region_id=region_id,
        region_slug=region_slug,
    )


def map_region(raw: Any) -> RegionWithComunas:
    """
    Mapea una región cruda con sus comunas.

    El nombre sale de `region` o `nombre`; el id de `id` o, si falta, del
    nombre. Si el nombre es vacío el slug se genera desde `region-<id>`.
    """
    if not isinstance(raw, Mapping):
        logger.debug(f"Registro de región no es un objeto: {raw!r}")
        raw = {}

    name = raw.get("region") or raw.get("nombre") or ""
    name = name if isinstance(name, str) else str(name)

    raw_id = raw.get("id")
    region_id = name if raw_id is None else str(raw_id)
    region_slug = slugify(name or f"region-{region_id}")

    raw_comunas = raw.get("comunas") or []
    if not isinstance(raw_comunas, list):
        logger.warning(f"Comunas inesperadas en región {name!r}, se ignoran")
        raw_comunas = []

    return RegionWithComunas(
        id=region_id,
        name=name,
        slug=region_slug,
        comunas=[map_comuna(c, region_id, region_slug) for c in raw_comunas],
    )


def map_regions(payload: Any) -> List[RegionWithComunas]:
    """
    Mapea el payload completo de regiones.

    Args:
        payload: Respuesta de la API. Si no es una lista se trata como vacía.

    Returns:
        Regiones en el orden recibido.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        logger.warning(
            f"Payload de regiones inesperado ({type(payload).__name__}), se ignora"
        )
        return []

    regions = [map_region(item) for item in payload]
    logger.info(
        f"Regiones mapeadas: {len(regions)} "
        f"({sum(len(r.comunas) for r in regions)} comunas)"
    )
    return regions


def flatten_comunas(regions: List[RegionWithComunas]) -> List[Comuna]:
    """Todas las comunas en una sola lista, región por región."""
    return [comuna for region in regions for comuna in region.comunas]


def index_comunas(regions: List[RegionWithComunas]) -> Dict[str, List[Comuna]]:
    """
    Índice slug de región -> comunas.

    Las listas son las mismas de cada región, de modo que ambas vistas
    no pueden divergir. Si dos regiones comparten slug gana la última.
    """
    return {region.slug: region.comunas for region in regions}
