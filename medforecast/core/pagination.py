"""
Vista paginada de la tabla de forecast
======================================
Deriva la pagina visible de una serie sin volver a pedirla al servicio.

Las filas respetan el orden de claves del catalogo (no se reordenan por
fecha). Cualquier pagina fuera de rango se ajusta a [1, total_paginas].
"""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from medforecast.core.date_normalizer import normalize
from medforecast.utils.formatters import formato_decimal
from medforecast.utils.logger import log_execution_time


@dataclass(frozen=True)
class TablePage:
    """Pagina visible de la tabla"""
    rows: List[Dict[str, str]] = field(default_factory=list)
    page: int = 1
    page_count: int = 1

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


def page_count(n_items: int, page_size: int) -> int:
    """Total de paginas; nunca menor que 1"""
    if page_size <= 0:
        raise ValueError("page_size debe ser positivo")
    return max(1, math.ceil(n_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, int(page)), max(1, total_pages))


def first_page(page: int, total_pages: int) -> int:
    return 1


def prev_page(page: int, total_pages: int) -> int:
    return clamp_page(page - 1, total_pages)


def next_page(page: int, total_pages: int) -> int:
    return clamp_page(page + 1, total_pages)


def last_page(page: int, total_pages: int) -> int:
    return clamp_page(total_pages, total_pages)


@log_execution_time
def derive(series: Mapping[str, float], page: int, page_size: int) -> TablePage:
    """
    Calcula la pagina visible de una serie.

    Args:
        series: Mapeo fecha -> valor en el orden del servicio
        page: Pagina solicitada (se ajusta al rango valido)
        page_size: Filas por pagina

    Returns:
        TablePage con filas {date, value} ya formateadas
    """
    fechas = list(series.keys())
    total = page_count(len(fechas), page_size)
    actual = clamp_page(page, total)

    inicio = (actual - 1) * page_size
    visibles = fechas[inicio:inicio + page_size]

    rows = [
        {"date": normalize(fecha), "value": formato_decimal(series[fecha], 2)}
        for fecha in visibles
    ]
    return TablePage(rows=rows, page=actual, page_count=total)
