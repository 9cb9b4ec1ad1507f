"""
Cliente HTTP para la API de la tienda.

Capa delgada sobre requests con:
- URL base configurable
- Timeout configurable
- Reintentos opcionales (por defecto un solo intento)
- Clasificación de fallos por ruta (sin base URL, timeout, red, 401, 404, 5xx...)
- Logging estructurado

Nunca lanza: ante cualquier fallo registra la causa y devuelve None.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class FetchErrorCause:
    """Causas de fallo de una petición."""

    MISSING_BASE_URL = "missing-base-url"
    TIMEOUT = "timeout"
    NETWORK = "network"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not-found"
    SERVER_ERROR = "server-error"
    INVALID_JSON = "invalid-json"
    UNKNOWN = "unknown"


def classify_status(status_code: int) -> str:
    """
    Clasifica un código HTTP de error.

    Solo 401 cuenta como no autorizado; 403 y otros 4xx quedan como
    desconocidos.
    """
    if status_code == 401:
        return FetchErrorCause.UNAUTHORIZED
    if status_code == 404:
        return FetchErrorCause.NOT_FOUND
    if status_code >= 500:
        return FetchErrorCause.SERVER_ERROR
    return FetchErrorCause.UNKNOWN


class HttpClient:
    """Cliente HTTP de solo lectura para la API."""

    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10,
        max_retries: int = 1,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Inicializa el cliente HTTP.

        Args:
            base_url: URL base de la API (ej: https://api.example.com).
            timeout: Timeout por request en segundos.
            max_retries: Número máximo de intentos por petición.
            headers: Headers adicionales para las peticiones.
        """
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)
        self.errors: Dict[str, str] = {}

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> Optional[Any]:
        """
        Realiza una petición GET y decodifica el JSON.

        Args:
            path: Ruta relativa a la URL base (ej: /productos).

        Returns:
            Respuesta JSON o None si falla.
        """
        self.errors.pop(path, None)

        if not self.base_url:
            return self._fail(
                path,
                FetchErrorCause.MISSING_BASE_URL,
                "API_URL no configurado",
                level=logging.ERROR,
            )

        url = self.url_for(path)

        for attempt in range(self.max_retries):
            last_attempt = attempt == self.max_retries - 1
            try:
                logger.debug(f"GET {url} (intento {attempt + 1}/{self.max_retries})")
                response = self.session.get(url, timeout=self.timeout)

                # Rate limiting o error de servidor: se puede reintentar
                if response.status_code == 429 or response.status_code >= 500:
                    cause = classify_status(response.status_code)
                    if last_attempt:
                        return self._fail(
                            path, cause, f"status {response.status_code}"
                        )
                    wait_time = 2 ** attempt
                    logger.warning(
                        f"Error {response.status_code} en {url}. "
                        f"Reintentando en {wait_time}s..."
                    )
                    time.sleep(wait_time)
                    continue

                if response.status_code >= 400:
                    return self._fail(
                        path,
                        classify_status(response.status_code),
                        f"status {response.status_code}",
                    )

                try:
                    return response.json()
                except ValueError as e:
                    return self._fail(path, FetchErrorCause.INVALID_JSON, str(e))

            except requests.Timeout as e:
                if last_attempt:
                    return self._fail(path, FetchErrorCause.TIMEOUT, str(e))
                logger.warning(f"Timeout en {url} (intento {attempt + 1})")
                time.sleep(2 ** attempt)

            except requests.ConnectionError as e:
                if last_attempt:
                    return self._fail(path, FetchErrorCause.NETWORK, str(e))
                logger.warning(f"Error de red en {url} (intento {attempt + 1})")
                time.sleep(2 ** attempt)

            except requests.RequestException as e:
                return self._fail(path, FetchErrorCause.UNKNOWN, str(e))

        return None

    def error_for(self, path: str) -> Optional[str]:
        """Causa del último fallo de una ruta (None si la última petición funcionó)."""
        return self.errors.get(path)

    def close(self) -> None:
        """Cierra la sesión HTTP."""
        self.session.close()

    def _fail(
        self,
        path: str,
        cause: str,
        message: str,
        level: int = logging.WARNING,
    ) -> None:
        """Registra el fallo clasificado y devuelve None."""
        self.errors[path] = cause
        logger.log(level, f"[API WARN] {path} -> {cause}: {message}")
        return None
