"""
Callbacks del Dashboard de Forecast
===================================

Cada callback lee el estado desde store-dashboard, delega en el
OrchestratorController y escribe de vuelta solo las claves que cambiaron
(dash.Patch), para que callbacks superpuestos no pisen estado ajeno.

- cargar_datos_iniciales: medicinas, regiones, catalogo y stock
- generar_forecast: envia la seleccion y carga el grafico
- refrescar_datos: recalculo en el servidor + recarga de catalogo/stock
- cambiar_medicina_tabla / cambiar_pagina: navegacion de la tabla
- renderizar_dashboard: estado -> componentes
"""
from dash import callback, ctx, no_update, Output, Input, State, Patch

from medforecast.components import (
    crear_figura_uso,
    crear_lista_advertencias,
    datos_tabla,
    estilo_panel,
)
from medforecast.config import obtener_configuracion
from medforecast.services.forecast_repository import ForecastRepository
from medforecast.services.orchestrator import (
    DashboardState,
    OrchestratorController,
    state_changes,
)
from medforecast.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)

# Instancia global del controlador
_controller = None


def get_controller() -> OrchestratorController:
    """Obtiene instancia singleton del OrchestratorController."""
    global _controller
    if _controller is None:
        settings = obtener_configuracion()
        _controller = OrchestratorController(
            ForecastRepository(settings),
            items_per_page=settings.items_per_page
        )
    return _controller


def set_controller(controller: OrchestratorController) -> None:
    """Reemplaza el controlador (util para pruebas o configuraciones propias)."""
    global _controller
    _controller = controller


def _parche(anterior: DashboardState, nuevo: DashboardState):
    """Patch con las claves modificadas, o no_update si no hubo cambios"""
    cambios = state_changes(anterior, nuevo)
    if not cambios:
        return no_update
    parche = Patch()
    for clave, valor in cambios.items():
        parche[clave] = valor
    return parche


def _valor_dropdown_tabla(anterior: DashboardState, nuevo: DashboardState):
    if nuevo.table_medicine == anterior.table_medicine:
        return no_update
    return nuevo.table_medicine or None


@callback(
    Output("store-dashboard", "data"),
    Output("select-medicina-tabla", "value"),
    Input("url", "pathname"),
    State("store-dashboard", "data"),
    running=[
        (Output("indicador-carga-tabla", "style"), {"display": "block"}, {"display": "none"}),
        (Output("seccion-tabla", "style"), {"display": "none"}, {"display": "block"}),
    ]
)
def cargar_datos_iniciales(pathname, data):
    """Carga inicial concurrente al montar la pagina"""
    anterior = DashboardState.from_dict(data)
    nuevo = get_controller().on_mount(anterior)
    return _parche(anterior, nuevo), _valor_dropdown_tabla(anterior, nuevo)


@callback(
    Output("store-dashboard", "data", allow_duplicate=True),
    Input("btn-forecast", "n_clicks"),
    State("select-periodo", "value"),
    State("select-medicina", "value"),
    State("select-region", "value"),
    State("store-dashboard", "data"),
    running=[
        (Output("btn-forecast", "disabled"), True, False),
        (Output("btn-forecast", "children"), "Loading...", "Forecast Medication"),
        (Output("indicador-carga-grafico", "style"),
         {"display": "flex", "height": "300px"}, {"display": "none"}),
        (Output("seccion-grafico", "style"), {"display": "none"}, {"display": "block"}),
        (Output("indicador-carga-tabla", "style"), {"display": "block"}, {"display": "none"}),
        (Output("seccion-tabla", "style"), {"display": "none"}, {"display": "block"}),
    ],
    prevent_initial_call=True
)
def generar_forecast(n_clicks, periodo, medicina, region, data):
    """
    Envia la seleccion actual (aunque este incompleta) y carga el grafico.
    El servicio decide si acepta la combinacion.
    """
    if not n_clicks:
        return no_update

    controller = get_controller()
    anterior = DashboardState.from_dict(data)

    state = controller.set_period(anterior, periodo)
    state = controller.set_medicine(state, medicina)
    state = controller.set_region(state, region)
    logger.info(f"Generando forecast para {state.selection.to_dict()}")

    nuevo = controller.on_submit(state)
    return _parche(anterior, nuevo)


@callback(
    Output("store-dashboard", "data", allow_duplicate=True),
    Output("select-medicina-tabla", "value", allow_duplicate=True),
    Input("btn-refresh", "n_clicks"),
    State("store-dashboard", "data"),
    running=[
        (Output("btn-refresh", "disabled"), True, False),
        (Output("texto-btn-refresh", "children"), "Refreshing...", "Refresh Data"),
        (Output("indicador-carga-tabla", "style"), {"display": "block"}, {"display": "none"}),
        (Output("seccion-tabla", "style"), {"display": "none"}, {"display": "block"}),
    ],
    prevent_initial_call=True
)
def refrescar_datos(n_clicks, data):
    """Pide el recalculo al servidor y recarga catalogo y advertencias"""
    if not n_clicks:
        return no_update, no_update

    anterior = DashboardState.from_dict(data)
    nuevo = get_controller().on_refresh_requested(anterior)
    return _parche(anterior, nuevo), _valor_dropdown_tabla(anterior, nuevo)


@callback(
    Output("store-dashboard", "data", allow_duplicate=True),
    Input("select-medicina-tabla", "value"),
    State("store-dashboard", "data"),
    prevent_initial_call=True
)
def cambiar_medicina_tabla(medicina, data):
    """Cambia la medicina de la tabla y vuelve a la pagina 1"""
    anterior = DashboardState.from_dict(data)
    nuevo = get_controller().on_table_medicine_changed(anterior, medicina)
    return _parche(anterior, nuevo)


@callback(
    Output("store-dashboard", "data", allow_duplicate=True),
    Input("btn-pagina-primera", "n_clicks"),
    Input("btn-pagina-anterior", "n_clicks"),
    Input("btn-pagina-siguiente", "n_clicks"),
    Input("btn-pagina-ultima", "n_clicks"),
    State("store-dashboard", "data"),
    prevent_initial_call=True
)
def cambiar_pagina(n_primera, n_anterior, n_siguiente, n_ultima, data):
    """Navegacion de la tabla; paginas fuera de rango se ajustan"""
    controller = get_controller()
    anterior = DashboardState.from_dict(data)

    navegacion = {
        "btn-pagina-primera": controller.on_first_page,
        "btn-pagina-anterior": controller.on_prev_page,
        "btn-pagina-siguiente": controller.on_next_page,
        "btn-pagina-ultima": controller.on_last_page,
    }
    handler = navegacion.get(ctx.triggered_id)
    if handler is None:
        return no_update

    return _parche(anterior, handler(anterior))


@callback(
    Output("grafico-forecast", "figure"),
    Output("grafico-forecast", "style"),
    Output("select-medicina", "options"),
    Output("select-region", "options"),
    Output("select-medicina-tabla", "options"),
    Output("panel-advertencias", "style"),
    Output("lista-advertencias", "children"),
    Output("tabla-forecast", "rowData"),
    Output("contenedor-tabla-datos", "style"),
    Output("mensaje-sin-datos", "style"),
    Output("texto-pagina", "children"),
    Output("btn-pagina-primera", "disabled"),
    Output("btn-pagina-anterior", "disabled"),
    Output("btn-pagina-siguiente", "disabled"),
    Output("btn-pagina-ultima", "disabled"),
    Output("mensaje-servicio", "children"),
    Input("store-dashboard", "data")
)
@log_execution_time
def renderizar_dashboard(data):
    """Convierte el estado en propiedades de los componentes"""
    vista = get_controller().view_model(DashboardState.from_dict(data))
    tabla = datos_tabla(vista.table)

    estilo_grafico = {"display": "block"} if vista.chart is not None else {"display": "none"}

    return (
        crear_figura_uso(vista.chart),
        estilo_grafico,
        [{"label": m, "value": m} for m in vista.medicines],
        [{"label": r, "value": r} for r in vista.regions],
        [{"label": m, "value": m} for m in vista.table_medicines],
        estilo_panel(vista.has_stock_warnings),
        crear_lista_advertencias(vista.stock_warnings),
        tabla["row_data"],
        tabla["estilo_tabla"],
        tabla["estilo_sin_datos"],
        tabla["texto_pagina"],
        tabla["primera_deshabilitada"],
        tabla["anterior_deshabilitada"],
        tabla["siguiente_deshabilitada"],
        tabla["ultima_deshabilitada"],
        vista.message,
    )
