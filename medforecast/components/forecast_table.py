"""
Tabla de Forecast
=================
Tabla paginada (Date / Forecast Value) con selector de medicina y
controles First / Prev / Next / Last.
"""
from typing import Any, Dict, Optional

import dash_ag_grid as dag
import dash_bootstrap_components as dbc
from dash import html, dcc

from medforecast.core.pagination import TablePage
from medforecast.utils.constants import MENSAJE_SIN_DATOS
from medforecast.utils.formatters import formato_pagina
from medforecast.utils.grid_helpers import column_defs_forecast, default_col_def
from medforecast.utils.theme import ESTILO_BOTON_PAGINA

BOTONES_PAGINA = [
    ("btn-pagina-primera", "First"),
    ("btn-pagina-anterior", "Prev"),
    ("btn-pagina-siguiente", "Next"),
    ("btn-pagina-ultima", "Last"),
]


def _boton_pagina(boton_id: str, texto: str) -> dbc.Button:
    return dbc.Button(texto, id=boton_id, color="primary", size="sm",
                      disabled=True, style=ESTILO_BOTON_PAGINA)


def crear_tabla_forecast() -> html.Div:
    """Layout de la seccion de tabla"""
    botones = [_boton_pagina(bid, texto) for bid, texto in BOTONES_PAGINA]

    return html.Div([
        html.P(MENSAJE_SIN_DATOS, id="mensaje-sin-datos", className="text-muted"),
        html.Div([
            html.H3("Forecast Table", style={"fontSize": "1.25rem"}),
            dcc.Dropdown(id="select-medicina-tabla", clearable=False,
                         style={"width": "200px", "marginBottom": "10px"}),
            dag.AgGrid(
                id="tabla-forecast",
                columnDefs=column_defs_forecast(),
                defaultColDef=default_col_def(),
                rowData=[],
                dashGridOptions={"domLayout": "autoHeight", "suppressCellFocus": True},
                className="ag-theme-alpine",
                style={"width": "100%"},
            ),
            html.Div([
                botones[0],
                botones[1],
                html.Span(id="texto-pagina", style={"padding": "5px 10px"}),
                botones[2],
                botones[3],
            ], className="d-flex justify-content-center align-items-center gap-2 mt-3"),
        ], id="contenedor-tabla-datos", style={"display": "none"}),
    ])


def datos_tabla(tabla: Optional[TablePage]) -> Dict[str, Any]:
    """
    Propiedades de la tabla y la paginacion para una pagina derivada.

    Args:
        tabla: Pagina visible, o None si no hay serie seleccionada

    Returns:
        Dict con rowData, texto de pagina, estado de los botones y
        visibilidad de la tabla frente al mensaje "sin datos"
    """
    if tabla is None:
        return {
            "row_data": [],
            "texto_pagina": "",
            "primera_deshabilitada": True,
            "anterior_deshabilitada": True,
            "siguiente_deshabilitada": True,
            "ultima_deshabilitada": True,
            "estilo_tabla": {"display": "none"},
            "estilo_sin_datos": {"display": "block"},
        }

    return {
        "row_data": list(tabla.rows),
        "texto_pagina": formato_pagina(tabla.page, tabla.page_count),
        "primera_deshabilitada": not tabla.has_prev,
        "anterior_deshabilitada": not tabla.has_prev,
        "siguiente_deshabilitada": not tabla.has_next,
        "ultima_deshabilitada": not tabla.has_next,
        "estilo_tabla": {"display": "block"},
        "estilo_sin_datos": {"display": "none"},
    }
