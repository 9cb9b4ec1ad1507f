"""
Generación de slugs para URLs.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: Any) -> str:
    """
    Convierte un texto en un slug en minúsculas separado por guiones.

    Elimina acentos y colapsa cualquier secuencia de caracteres no
    alfanuméricos en un solo guion. Es idempotente:
    slugify(slugify(x)) == slugify(x).

    Args:
        text: Texto a convertir. Se convierte a str si no lo es.

    Returns:
        Slug resultante (puede ser vacío).
    """
    if text is None:
        return ""

    # Eliminar acentos
    text = unicodedata.normalize("NFKD", str(text))
    text = "".join(c for c in text if not unicodedata.combining(c))

    # Convertir a minúsculas
    text = text.lower()

    # Colapsar caracteres especiales en guiones
    text = _NON_ALNUM.sub("-", text)

    return text.strip("-")
