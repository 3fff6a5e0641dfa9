"""
Grafico de uso de medicinas
===========================
Figura de barras a partir de la serie ya preparada por chart_series.
"""
from typing import Optional

import plotly.graph_objects as go

from medforecast.core.chart_series import ChartSeries
from medforecast.utils.constants import (
    MENSAJE_SIN_DATOS,
    NOMBRE_SERIE_GRAFICO,
    TITULO_GRAFICO,
    TITULO_EJE_X,
    TITULO_EJE_Y,
)
from medforecast.utils.plotly_helpers import crear_figura_vacia
from medforecast.utils.theme import PLOTLY_TEMPLATE, COLORS, color_con_alpha


def crear_figura_uso(serie: Optional[ChartSeries]) -> go.Figure:
    """
    Crea el grafico de barras del forecast.

    Args:
        serie: Etiquetas y valores en el orden del servicio (None si aun
               no se genero ningun forecast)

    Returns:
        go.Figure con una sola serie "Medicine Usage"
    """
    if serie is None or serie.is_empty:
        return crear_figura_vacia(MENSAJE_SIN_DATOS)

    # Posiciones en x: etiquetas repetidas siguen siendo barras distintas
    posiciones = list(range(len(serie.labels)))

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=posiciones,
        customdata=serie.labels,
        y=serie.values,
        name=NOMBRE_SERIE_GRAFICO,
        marker=dict(
            color=color_con_alpha('chart_bar', 0.5),
            line=dict(color=color_con_alpha('chart_bar', 1), width=1)
        ),
        hovertemplate='<b>%{customdata}</b><br>Amount: %{y:,.2f}<extra></extra>'
    ))

    layout = PLOTLY_TEMPLATE["layout"]
    layout_base = {k: v for k, v in layout.items()
                   if k not in ["xaxis", "yaxis", "legend", "title"]}
    fig.update_layout(
        **layout_base,
        title=dict(text=TITULO_GRAFICO, x=0.5, font=layout["title"]["font"]),
        xaxis=dict(
            **layout["xaxis"], title=dict(text=TITULO_EJE_X),
            tickmode="array", tickvals=posiciones, ticktext=serie.labels
        ),
        yaxis=dict(**layout["yaxis"], title=dict(text=TITULO_EJE_Y), rangemode="tozero"),
        legend=dict(
            orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5,
            bgcolor="rgba(0,0,0,0)", font={"color": COLORS['text_secondary']}
        ),
        showlegend=True,
        bargap=0.2
    )
    return fig
