# tests/conftest.py
# Fixtures compartidos: respuestas HTTP simuladas y repositorio en memoria.

import pytest
import requests

from medforecast.config import ApiSettings
from medforecast.services.forecast_repository import RepositoryResult
from medforecast.utils.constants import (
    ENDPOINT_MEDICINAS,
    ENDPOINT_REGIONES,
    ENDPOINT_CATALOGO,
    ENDPOINT_STOCK,
    ENDPOINT_FORECAST,
    ENDPOINT_SELECCION,
    ENDPOINT_RECALCULO,
)


class FakeResponse:
    """Respuesta minima con la interfaz de requests.Response que usa el repositorio"""

    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else ""

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """
    Sesion HTTP en memoria.

    `rutas` mapea (metodo, url) -> FakeResponse o una excepcion a lanzar.
    Cada llamada queda registrada en `llamadas`.
    """

    def __init__(self, rutas=None):
        self.rutas = dict(rutas or {})
        self.llamadas = []

    def request(self, method, url, timeout=None, **kwargs):
        self.llamadas.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        respuesta = self.rutas.get((method, url))
        if respuesta is None:
            return FakeResponse(status_code=404)
        if isinstance(respuesta, Exception):
            raise respuesta
        return respuesta


class FakeRepository:
    """Repositorio con resultados fijos; registra las selecciones enviadas"""

    def __init__(self, medicines=None, regions=None, catalog=None, stock=None, series=None):
        self.medicines = medicines if medicines is not None else ["Paracetamol", "Ibuprofen"]
        self.regions = regions if regions is not None else ["Lagos", "Kano"]
        self.catalog = catalog
        self.stock = stock if stock is not None else {}
        self.series = series if series is not None else {"2024-01-01 00:00:00": 12.0}
        self.submit_ok = True
        self.recompute_ok = True
        self.enviadas = []
        self.llamadas = []

    def list_medicines(self):
        self.llamadas.append("medicines")
        return RepositoryResult(exito=True, datos=list(self.medicines), endpoint=ENDPOINT_MEDICINAS)

    def list_regions(self):
        self.llamadas.append("regions")
        return RepositoryResult(exito=True, datos=list(self.regions), endpoint=ENDPOINT_REGIONES)

    def fetch_catalog(self):
        self.llamadas.append("catalog")
        if not self.catalog:
            return RepositoryResult(exito=False, endpoint=ENDPOINT_CATALOGO,
                                    mensaje="Catalogo vacio", error_tipo="ShapeMismatchError")
        return RepositoryResult(exito=True, datos=dict(self.catalog), endpoint=ENDPOINT_CATALOGO,
                                default_medicine=next(iter(self.catalog)))

    def fetch_stock_warnings(self):
        self.llamadas.append("stock")
        return RepositoryResult(exito=True, datos=dict(self.stock), endpoint=ENDPOINT_STOCK)

    def fetch_series_for_current_selection(self):
        self.llamadas.append("forecast")
        if self.series is False:
            return RepositoryResult(exito=False, endpoint=ENDPOINT_FORECAST,
                                    mensaje="Peticion fallida", error_tipo="NetworkFailureError")
        return RepositoryResult(exito=True, datos=dict(self.series), endpoint=ENDPOINT_FORECAST)

    def submit_selection(self, request):
        self.llamadas.append("selection")
        self.enviadas.append(request.to_payload())
        if not self.submit_ok:
            return RepositoryResult(exito=False, endpoint=ENDPOINT_SELECCION,
                                    mensaje="Servicio no disponible", error_tipo="NetworkFailureError")
        return RepositoryResult(exito=True, datos="Selection saved", endpoint=ENDPOINT_SELECCION,
                                mensaje="Selection saved")

    def trigger_server_recompute(self):
        self.llamadas.append("recompute")
        if not self.recompute_ok:
            return RepositoryResult(exito=False, endpoint=ENDPOINT_RECALCULO,
                                    mensaje="Respuesta no exitosa", error_tipo="NetworkFailureError")
        return RepositoryResult(exito=True, datos="ok", endpoint=ENDPOINT_RECALCULO)


# --- Fixtures ---

@pytest.fixture
def settings():
    return ApiSettings(base_url="http://forecast.test", prefix="/api", timeout=5.0, items_per_page=10)


@pytest.fixture
def url(settings):
    """Construye la URL absoluta de un endpoint con la configuracion de prueba"""
    return settings.url


@pytest.fixture
def paracetamol_catalog():
    return {"Paracetamol": {"2024-01-01": 10.5, "2024-02-01": 20.25}}


@pytest.fixture
def large_catalog():
    """Dos medicinas; la primera con 25 puntos (3 paginas de 10)"""
    serie = {f"2024-01-{dia:02d}": float(dia) for dia in range(1, 26)}
    return {"Amoxicillin": serie, "Paracetamol": {"2024-01-01": 10.5, "2024-02-01": 20.25}}


@pytest.fixture
def fake_repository(large_catalog):
    return FakeRepository(catalog=large_catalog, stock={"Paracetamol": "Stock below 20 units"})


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Connection refused")
