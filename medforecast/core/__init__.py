"""
Nucleo de orquestacion del dashboard

Logica pura, sin dependencias de Dash ni de red:
- date_normalizer: etiquetas de fecha
- selection: periodo/medicina/region y solicitud de forecast
- pagination: pagina visible de la tabla
- chart_series: etiquetas y valores del grafico
"""

from .date_normalizer import normalize, strip_time_suffix
from .selection import Period, SelectionRequest, SelectionState
from .pagination import TablePage, derive, page_count, clamp_page
from .chart_series import ChartSeries, build

__all__ = [
    'normalize', 'strip_time_suffix',
    'Period', 'SelectionRequest', 'SelectionState',
    'TablePage', 'derive', 'page_count', 'clamp_page',
    'ChartSeries', 'build',
]
