"""Componentes visuales del dashboard"""

from .charts import crear_figura_uso
from .forecast_table import crear_tabla_forecast, datos_tabla
from .stock_warnings import crear_panel_advertencias, crear_lista_advertencias, estilo_panel

__all__ = [
    'crear_figura_uso',
    'crear_tabla_forecast',
    'datos_tabla',
    'crear_panel_advertencias',
    'crear_lista_advertencias',
    'estilo_panel',
]
