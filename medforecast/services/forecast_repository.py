"""
Repositorio del Servicio de Forecast
====================================

Adaptador HTTP hacia el servicio remoto de forecast y stock.

Cada operacion devuelve un RepositoryResult y nunca lanza excepciones:
los fallos de red (NetworkFailureError) y de forma de la respuesta
(ShapeMismatchError) se capturan aqui, se registran en el log y se
devuelven como resultado fallido. No hay reintentos internos.

Endpoints (relativos al prefijo de la API):
    GET  /medicines          -> lista de medicinas
    GET  /states             -> lista de regiones
    GET  /all_forecasts      -> [{"forecasts": {medicina: {fecha: valor}}}]
    GET  /stock              -> {medicina: advertencia}
    GET  /forecast           -> {fecha: valor} de la ultima seleccion enviada
    POST /selection          -> {"message": str}
    GET  /all_forecast_post  -> recalculo en el servidor (respuesta opaca)
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests
from loguru import logger

from medforecast.config import ApiSettings, obtener_configuracion
from medforecast.core.selection import SelectionRequest
from medforecast.utils.constants import (
    ENDPOINT_MEDICINAS,
    ENDPOINT_REGIONES,
    ENDPOINT_CATALOGO,
    ENDPOINT_STOCK,
    ENDPOINT_FORECAST,
    ENDPOINT_SELECCION,
    ENDPOINT_RECALCULO,
)
from medforecast.utils.exceptions import (
    MedForecastError,
    NetworkFailureError,
    ShapeMismatchError,
)


@dataclass
class RepositoryResult:
    """Resultado de una operacion del repositorio"""
    exito: bool
    datos: Any = None
    endpoint: str = ""
    mensaje: str = ""
    error_tipo: Optional[str] = None
    default_medicine: str = ""

    @classmethod
    def fallo(cls, endpoint: str, error: Exception) -> "RepositoryResult":
        return cls(
            exito=False,
            endpoint=endpoint,
            mensaje=str(error),
            error_tipo=type(error).__name__,
        )


def _numero(valor: Any, endpoint: str) -> float:
    """Valida que un valor de forecast sea numerico"""
    if isinstance(valor, bool):
        raise ShapeMismatchError("Valor de forecast booleano", endpoint, "number")
    if isinstance(valor, (int, float)):
        return valor
    try:
        return float(valor)
    except (TypeError, ValueError):
        raise ShapeMismatchError(f"Valor de forecast no numerico: {valor!r}", endpoint, "number")


def _serie(datos: Any, endpoint: str) -> Dict[str, float]:
    """Valida una serie fecha -> valor conservando el orden de claves"""
    if not isinstance(datos, dict):
        raise ShapeMismatchError("La serie no es un objeto", endpoint, "mapping<date, number>")
    return {str(fecha): _numero(valor, endpoint) for fecha, valor in datos.items()}


def _lista_textos(datos: Any, endpoint: str) -> List[str]:
    if not isinstance(datos, list):
        raise ShapeMismatchError("Se esperaba una lista", endpoint, "sequence<string>")
    return [str(item) for item in datos]


class ForecastRepository:
    """
    Cliente del servicio de forecast.

    Ejemplo de uso:
        repo = ForecastRepository()
        resultado = repo.fetch_catalog()

        if resultado.exito:
            print(resultado.default_medicine)
        else:
            print(f"Error: {resultado.mensaje}")
    """

    def __init__(self, settings: Optional[ApiSettings] = None, session=None):
        """
        Args:
            settings: Configuracion de la API (default: desde el entorno)
            session: Objeto con metodo request(method, url, **kwargs),
                     por ejemplo requests.Session (default: modulo requests)
        """
        self.settings = settings or obtener_configuracion()
        self._http = session or requests

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _request(self, method: str, endpoint: str, expect_json: bool = True, **kwargs) -> Any:
        url = self.settings.url(endpoint)
        try:
            response = self._http.request(method, url, timeout=self.settings.timeout, **kwargs)
        except requests.RequestException as e:
            raise NetworkFailureError(f"Peticion fallida: {e}", endpoint=endpoint)

        if not 200 <= response.status_code < 300:
            raise NetworkFailureError(
                "Respuesta no exitosa del servicio",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            if not expect_json:
                return response.text
            raise ShapeMismatchError("La respuesta no es JSON valido", endpoint, "json")

    def _ejecutar(self, endpoint: str, operacion: Callable[[], RepositoryResult]) -> RepositoryResult:
        """Frontera de errores: ningun fallo sale de aqui como excepcion"""
        try:
            return operacion()
        except MedForecastError as e:
            logger.error(f"Error en {endpoint}: {e}")
            return RepositoryResult.fallo(endpoint, e)
        except Exception as e:
            logger.exception(f"Error inesperado en {endpoint}: {e}")
            return RepositoryResult.fallo(endpoint, e)

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    def list_medicines(self) -> RepositoryResult:
        def operacion():
            datos = _lista_textos(self._request("GET", ENDPOINT_MEDICINAS), ENDPOINT_MEDICINAS)
            logger.debug(f"{len(datos)} medicinas disponibles")
            return RepositoryResult(exito=True, datos=datos, endpoint=ENDPOINT_MEDICINAS)

        return self._ejecutar(ENDPOINT_MEDICINAS, operacion)

    def list_regions(self) -> RepositoryResult:
        def operacion():
            datos = _lista_textos(self._request("GET", ENDPOINT_REGIONES), ENDPOINT_REGIONES)
            logger.debug(f"{len(datos)} regiones disponibles")
            return RepositoryResult(exito=True, datos=datos, endpoint=ENDPOINT_REGIONES)

        return self._ejecutar(ENDPOINT_REGIONES, operacion)

    def fetch_catalog(self) -> RepositoryResult:
        """
        Obtiene el catalogo completo medicina -> serie.

        Solo se usa el primer elemento de la respuesta. La medicina por
        defecto de la tabla es la primera clave en el orden del servicio
        ("" si el catalogo esta vacio).
        """
        def operacion():
            datos = self._request("GET", ENDPOINT_CATALOGO)
            if not isinstance(datos, list) or len(datos) == 0:
                raise ShapeMismatchError(
                    "Catalogo vacio o con formato inesperado",
                    ENDPOINT_CATALOGO, "sequence<{forecasts}>"
                )
            primero = datos[0]
            if not isinstance(primero, dict) or not isinstance(primero.get("forecasts"), dict):
                raise ShapeMismatchError(
                    "Falta la clave 'forecasts'", ENDPOINT_CATALOGO, "{forecasts: mapping}"
                )

            catalogo = {
                str(medicina): _serie(serie, ENDPOINT_CATALOGO)
                for medicina, serie in primero["forecasts"].items()
            }
            default = next(iter(catalogo), "")
            logger.info(f"Catalogo cargado: {len(catalogo)} medicinas")
            return RepositoryResult(
                exito=True, datos=catalogo, endpoint=ENDPOINT_CATALOGO, default_medicine=default
            )

        return self._ejecutar(ENDPOINT_CATALOGO, operacion)

    def fetch_stock_warnings(self) -> RepositoryResult:
        def operacion():
            datos = self._request("GET", ENDPOINT_STOCK)
            if not isinstance(datos, dict):
                raise ShapeMismatchError(
                    "Advertencias con formato inesperado", ENDPOINT_STOCK, "mapping<medicine, string>"
                )
            advertencias = {str(med): str(texto) for med, texto in datos.items()}
            if advertencias:
                logger.warning(f"{len(advertencias)} medicinas con stock bajo")
            return RepositoryResult(exito=True, datos=advertencias, endpoint=ENDPOINT_STOCK)

        return self._ejecutar(ENDPOINT_STOCK, operacion)

    def fetch_series_for_current_selection(self) -> RepositoryResult:
        """Serie del grafico para la ultima seleccion enviada (estado del servidor)"""
        def operacion():
            serie = _serie(self._request("GET", ENDPOINT_FORECAST), ENDPOINT_FORECAST)
            logger.debug(f"Serie de forecast con {len(serie)} puntos")
            return RepositoryResult(exito=True, datos=serie, endpoint=ENDPOINT_FORECAST)

        return self._ejecutar(ENDPOINT_FORECAST, operacion)

    def submit_selection(self, request: SelectionRequest) -> RepositoryResult:
        """Envia la seleccion; el servicio decide si la acepta"""
        def operacion():
            payload = request.to_payload()
            datos = self._request("POST", ENDPOINT_SELECCION, json=payload)
            mensaje = str(datos.get("message", "")) if isinstance(datos, dict) else ""
            logger.info(f"Seleccion enviada {payload}: {mensaje}")
            return RepositoryResult(
                exito=True, datos=mensaje, endpoint=ENDPOINT_SELECCION, mensaje=mensaje
            )

        return self._ejecutar(ENDPOINT_SELECCION, operacion)

    def trigger_server_recompute(self) -> RepositoryResult:
        """Pide al servicio recalcular los forecasts"""
        def operacion():
            datos = self._request("GET", ENDPOINT_RECALCULO, expect_json=False)
            logger.info(f"Forecasts recalculados en el servidor: {str(datos)[:200]}")
            return RepositoryResult(exito=True, datos=datos, endpoint=ENDPOINT_RECALCULO)

        return self._ejecutar(ENDPOINT_RECALCULO, operacion)
