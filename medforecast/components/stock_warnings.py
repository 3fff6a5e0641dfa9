"""
Panel de Advertencias de Stock
==============================
Lista medicina -> advertencia. Sin advertencias el panel no se muestra.
"""
from typing import Dict, List, Optional, Tuple

import dash_bootstrap_components as dbc
from dash import html

from medforecast.utils.theme import COLORS


def crear_panel_advertencias() -> html.Div:
    """Panel (oculto hasta que haya advertencias) con el boton de recalculo"""
    return html.Div([
        html.Div([
            html.Div([
                html.I(className="fas fa-exclamation-triangle fa-lg",
                       style={"color": COLORS["warning"]}),
                html.H3("Stock Warnings", className="ms-2 mb-0",
                        style={"color": COLORS["warning"], "fontSize": "1.25rem"}),
            ], className="d-flex align-items-center"),
            dbc.Button([
                html.I(className="fas fa-sync-alt me-1"),
                html.Span("Refresh Data", id="texto-btn-refresh"),
            ], id="btn-refresh", color="success", size="sm"),
        ], className="d-flex align-items-center justify-content-between mb-2"),
        html.Div(id="lista-advertencias", style={"color": COLORS["warning"]}),
    ], id="panel-advertencias", style=estilo_panel(False))


def estilo_panel(visible: bool) -> Dict[str, str]:
    if not visible:
        return {"display": "none"}
    return {
        "marginBottom": "30px",
        "backgroundColor": COLORS["warning_bg"],
        "border": f"1px solid {COLORS['warning_border']}",
        "borderRadius": "4px",
        "padding": "15px",
    }


def crear_lista_advertencias(advertencias: List[Tuple[str, str]]) -> Optional[html.Ul]:
    """
    Crea la lista de advertencias.

    Returns:
        html.Ul con una linea por medicina, o None si no hay advertencias
    """
    if not advertencias:
        return None

    return html.Ul([
        html.Li([html.Strong(f"{medicina}:"), f" {texto}"], style={"marginBottom": "5px"})
        for medicina, texto in advertencias
    ], style={"paddingLeft": "25px", "margin": "0"})
