"""
Configuracion de MedForecast
============================
Parametros del servicio de forecast leidos de variables de entorno
(o de un archivo .env en la raiz del proyecto):

- API_BASE_URL: URL base del servicio (ej: http://localhost:5000)
- API_PREFIX: prefijo de rutas de la API (default: /api)
- API_TIMEOUT: timeout en segundos por peticion (default: 30)
- ITEMS_PER_PAGE: filas por pagina de la tabla (default: 10)
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from medforecast.utils.constants import ITEMS_PER_PAGE
from medforecast.utils.exceptions import ConfigurationError
from medforecast.utils.logger import get_logger

logger = get_logger(__name__)

# Cargar variables de entorno
load_dotenv()

DEFAULT_BASE_URL = "http://localhost:5000"


@dataclass(frozen=True)
class ApiSettings:
    """Configuracion del cliente HTTP del servicio de forecast"""
    base_url: str = DEFAULT_BASE_URL
    prefix: str = "/api"
    timeout: float = 30.0
    items_per_page: int = ITEMS_PER_PAGE

    def url(self, endpoint: str) -> str:
        """Construye la URL absoluta de un endpoint (ej: '/medicines')"""
        prefix = "/" + self.prefix.strip("/") if self.prefix.strip("/") else ""
        return f"{self.base_url.rstrip('/')}{prefix}/{endpoint.lstrip('/')}"


def _env_value(name: str, fallback: str) -> str:
    return os.getenv(name, fallback).strip()


def _env_number(name: str, fallback, cast):
    raw = _env_value(name, str(fallback))
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"Valor invalido para {name}", {"value": raw})
    if value <= 0:
        raise ConfigurationError(f"{name} debe ser positivo", {"value": raw})
    return value


def obtener_configuracion() -> ApiSettings:
    """
    Construye la configuracion desde el entorno.

    Raises:
        ConfigurationError: si API_TIMEOUT o ITEMS_PER_PAGE no son numeros positivos
    """
    base_url = _env_value("API_BASE_URL", "")
    if not base_url:
        logger.warning(f"API_BASE_URL no definida, usando {DEFAULT_BASE_URL}")
        base_url = DEFAULT_BASE_URL

    return ApiSettings(
        base_url=base_url,
        prefix=_env_value("API_PREFIX", "/api"),
        timeout=_env_number("API_TIMEOUT", 30, float),
        items_per_page=_env_number("ITEMS_PER_PAGE", ITEMS_PER_PAGE, int),
    )
