"""
Tablero de Forecast de Medicinas
================================
Seleccion (periodo, medicina, region), grafico de uso, advertencias de
stock y tabla paginada del catalogo.
"""
import dash_bootstrap_components as dbc
from dash import html, dcc

from medforecast.components import crear_panel_advertencias, crear_tabla_forecast
from medforecast.services.orchestrator import DashboardState
from medforecast.utils.constants import (
    PERIODOS,
    PLACEHOLDER_PERIODO,
    PLACEHOLDER_MEDICINA,
    PLACEHOLDER_REGION,
)
from medforecast.utils.theme import COLORS

ESTILO_TITULO_SECCION = {
    "borderBottom": f"2px solid {COLORS['primary']}",
    "paddingBottom": "10px",
}


def _filtro(titulo: str, dropdown_id: str, placeholder: str, opciones=None) -> dbc.Col:
    return dbc.Col([
        html.H3(titulo, style={"fontSize": "1.1rem"}),
        dcc.Dropdown(id=dropdown_id, options=opciones or [], placeholder=placeholder,
                     className="dash-dropdown"),
    ], md=4, style={"minWidth": "200px"})


def crear_controles_seleccion() -> html.Div:
    """Fila de filtros y boton de forecast"""
    return html.Div([
        html.H2("Medicine Forecast Selection", className="mb-4", style=ESTILO_TITULO_SECCION),
        dbc.Row([
            _filtro("Select Time Period", "select-periodo", PLACEHOLDER_PERIODO, PERIODOS),
            _filtro("Select a Medicine", "select-medicina", PLACEHOLDER_MEDICINA),
            _filtro("Select a State", "select-region", PLACEHOLDER_REGION),
        ], className="g-3 mb-3"),
        html.Div(
            dbc.Button("Forecast Medication", id="btn-forecast", color="primary",
                       size="lg", style={"padding": "10px 30px"}),
            className="text-center mt-3"
        ),
        html.Div(id="mensaje-servicio", className="text-center text-muted small mt-2"),
    ], className="mb-4")


def crear_seccion_grafico() -> html.Div:
    return html.Div([
        html.Div(
            dbc.Spinner(color="primary", spinner_style={"width": "3rem", "height": "3rem"}),
            id="indicador-carga-grafico",
            className="justify-content-center align-items-center",
            style={"display": "none", "height": "300px"}
        ),
        html.Div(
            dcc.Graph(id="grafico-forecast", config={"displayModeBar": False}),
            id="seccion-grafico"
        ),
    ], className="mt-4")


def crear_seccion_notificaciones() -> html.Div:
    return html.Div([
        html.H2("Forecasts Notification", style=ESTILO_TITULO_SECCION),
        crear_panel_advertencias(),
        html.Div(
            dbc.Spinner(color="primary"),
            id="indicador-carga-tabla",
            className="text-center",
            style={"display": "none"}
        ),
        html.Div(crear_tabla_forecast(), id="seccion-tabla"),
    ], className="mt-5 mb-4")


layout = dbc.Container([
    dcc.Store(id="store-dashboard", storage_type="memory", data=DashboardState().to_dict()),
    crear_controles_seleccion(),
    crear_seccion_grafico(),
    crear_seccion_notificaciones(),
], style={"maxWidth": "800px", "padding": "20px"})
