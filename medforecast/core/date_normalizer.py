"""
Normalizacion de Fechas
=======================
Convierte las claves de fecha que envia el servicio (formato arbitrario)
en etiquetas legibles para el grafico y la tabla.

Dos niveles de precision:
- Parseo directo valido: "January 1, 2024"
- Parseo por componentes (año-mes-dia con desborde de calendario): "January 2024"

Si ninguno funciona se devuelve el texto original. Nunca lanza excepciones.
"""
import re
from typing import Any, Optional

import pandas as pd

from medforecast.utils.constants import NOMBRES_MESES
from medforecast.utils.exceptions import DateParseError
from medforecast.utils.logger import get_logger

logger = get_logger(__name__)

_SEPARADORES = re.compile(r"[-/]")
_ENTERO_INICIAL = re.compile(r"^\s*([+-]?\d+)")
_GRUPOS_DIGITOS = re.compile(r"\d+")

# Palabras relativas que pandas convierte en la fecha actual
_PALABRAS_RELATIVAS = {"now", "today", "tomorrow", "yesterday"}


def strip_time_suffix(raw: str) -> str:
    """Elimina lo que sigue al primer espacio ('2024-01-01 00:00:00' -> '2024-01-01')"""
    return str(raw).split(" ")[0]


def _contiene_año(raw: str, año: int) -> bool:
    """El texto trae el año explicito (completo, o con dos digitos)"""
    for grupo in _GRUPOS_DIGITOS.findall(raw):
        if grupo.startswith(str(año)):
            return True
        if len(grupo) == 2 and int(grupo) == año % 100:
            return True
    return False


def _parse_directo(raw: str) -> Optional[pd.Timestamp]:
    """
    Parseo directo con pandas.

    Se descartan las palabras relativas ("now", "today") y los resultados
    cuyo año no aparece en el texto ("May" -> año 1, "May 5" -> año actual).
    """
    if raw.strip().lower() in _PALABRAS_RELATIVAS:
        return None

    fecha = pd.to_datetime(raw, errors="coerce")
    if fecha is None or pd.isna(fecha):
        return None
    if fecha.year < 100 or not _contiene_año(raw, fecha.year):
        return None
    return fecha


def _entero_inicial(parte: str) -> int:
    """Lee el entero al inicio del texto ('07abc' -> 7), como parseInt"""
    match = _ENTERO_INICIAL.match(parte)
    if not match:
        raise DateParseError("Componente de fecha no numerico", raw=parte)
    return int(match.group(1))


def _parse_componentes(raw: str) -> Optional[pd.Timestamp]:
    """
    Interpreta el texto como año, mes (1-12) y dia separados por '-' o '/'.

    Los valores fuera de rango desbordan como en un calendario:
    mes 13 es enero del año siguiente, 30 de febrero es 1 de marzo.
    Los años 0-99 se interpretan como 1900-1999.
    """
    partes = _SEPARADORES.split(raw)
    if len(partes) < 3:
        return None

    try:
        año = _entero_inicial(partes[0])
        mes = _entero_inicial(partes[1])
        dia = _entero_inicial(partes[2])
    except DateParseError as e:
        logger.debug(f"Fecha no interpretable por componentes: {e}")
        return None

    if 0 <= año <= 99:
        año += 1900

    return pd.Timestamp(year=año, month=1, day=1) + pd.DateOffset(months=mes - 1, days=dia - 1)


def _etiqueta_completa(fecha: pd.Timestamp) -> str:
    return f"{NOMBRES_MESES[fecha.month - 1]} {fecha.day}, {fecha.year}"


def _etiqueta_mensual(fecha: pd.Timestamp) -> str:
    return f"{NOMBRES_MESES[fecha.month - 1]} {fecha.year}"


def normalize(raw: Any) -> Any:
    """
    Convierte una clave de fecha en etiqueta de visualizacion.

    Args:
        raw: Clave de fecha tal como llega del servicio

    Returns:
        "Month D, YYYY" si el parseo directo es valido, "Month YYYY" si solo
        el parseo por componentes lo es, o raw sin cambios en otro caso.
    """
    if not isinstance(raw, str):
        logger.debug(f"Fecha no textual, se devuelve sin cambios: {raw!r}")
        return raw

    try:
        fecha = _parse_directo(raw)
        if fecha is not None:
            return _etiqueta_completa(fecha)

        fecha = _parse_componentes(raw)
        if fecha is not None:
            return _etiqueta_mensual(fecha)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Error formateando fecha '{raw}': {e}")

    return raw
