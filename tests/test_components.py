# tests/test_components.py
# Componentes de Dash generados a partir del estado.

from dash import html, no_update
from dash._callback import GLOBAL_CALLBACK_LIST

from medforecast.callbacks.dashboard_callbacks import _parche, _valor_dropdown_tabla
from medforecast.components import crear_figura_uso, crear_lista_advertencias, datos_tabla, estilo_panel
from medforecast.core.chart_series import ChartSeries, build
from medforecast.core.pagination import TablePage
from medforecast.services.orchestrator import DashboardState
from medforecast.utils.constants import MENSAJE_SIN_DATOS


def test_table_sentinel_without_series():
    datos = datos_tabla(None)
    assert datos["row_data"] == []
    assert datos["estilo_tabla"] == {"display": "none"}
    assert datos["estilo_sin_datos"] == {"display": "block"}
    assert datos["primera_deshabilitada"] and datos["ultima_deshabilitada"]


def test_table_middle_page_enables_all_buttons():
    datos = datos_tabla(TablePage(rows=[{"date": "May 2024", "value": "1.00"}], page=2, page_count=3))
    assert datos["texto_pagina"] == "Page 2 of 3"
    assert not datos["primera_deshabilitada"]
    assert not datos["anterior_deshabilitada"]
    assert not datos["siguiente_deshabilitada"]
    assert not datos["ultima_deshabilitada"]
    assert datos["estilo_sin_datos"] == {"display": "none"}


def test_table_single_page_disables_navigation():
    datos = datos_tabla(TablePage(rows=[], page=1, page_count=1))
    assert datos["texto_pagina"] == "Page 1 of 1"
    assert datos["anterior_deshabilitada"] and datos["siguiente_deshabilitada"]


def test_no_stock_warnings_renders_nothing():
    assert crear_lista_advertencias([]) is None
    assert estilo_panel(False) == {"display": "none"}


def test_stock_warnings_list():
    lista = crear_lista_advertencias([("Paracetamol", "Stock below 20 units")])
    assert isinstance(lista, html.Ul)
    assert len(lista.children) == 1
    assert lista.children[0].children[0].children == "Paracetamol:"


def test_chart_placeholder_without_data():
    fig = crear_figura_uso(None)
    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == MENSAJE_SIN_DATOS


def test_chart_bar_series():
    fig = crear_figura_uso(ChartSeries(labels=["January 1, 2024"], values=[12.0]))
    assert len(fig.data) == 1
    assert fig.data[0].type == "bar"
    assert fig.data[0].name == "Medicine Usage"
    assert list(fig.data[0].x) == [0]
    assert list(fig.layout.xaxis.ticktext) == ["January 1, 2024"]
    assert fig.layout.title.text == "Medicine Usage Forecast"


def test_chart_keeps_repeated_labels_as_separate_bars():
    serie = build({
        "2024-01-01 00:00:00": 4,
        "2024-01-01 12:00:00": 9,
        "2024-02-30": 2,
        "2024-03-15": 5,
    })
    assert serie.labels[0] == serie.labels[1]

    fig = crear_figura_uso(serie)

    assert list(fig.data[0].x) == [0, 1, 2, 3]
    assert list(fig.data[0].y) == [4, 9, 2, 5]
    assert list(fig.layout.xaxis.tickvals) == [0, 1, 2, 3]
    assert list(fig.layout.xaxis.ticktext) == [
        "January 1, 2024", "January 1, 2024", "March 2024", "March 15, 2024",
    ]


def test_patch_skips_unchanged_state():
    estado = DashboardState(current_page=2)
    assert _parche(estado, estado) is no_update
    assert _valor_dropdown_tabla(estado, estado) is no_update


def test_table_dropdown_follows_default_medicine():
    nuevo = DashboardState(table_medicine="Paracetamol")
    assert _valor_dropdown_tabla(DashboardState(), nuevo) == "Paracetamol"


def _running_por_input(componente, propiedad):
    for spec in GLOBAL_CALLBACK_LIST:
        if {"id": componente, "property": propiedad} in spec["inputs"]:
            return spec.get("running", {}).get("running", {})
    raise AssertionError(f"Sin callback para {componente}.{propiedad}")


def test_table_spinner_during_mount_and_refresh():
    for componente, propiedad in [("url", "pathname"), ("btn-refresh", "n_clicks")]:
        running = _running_por_input(componente, propiedad)
        assert running["indicador-carga-tabla.style"] == {"display": "block"}
        assert running["seccion-tabla.style"] == {"display": "none"}
