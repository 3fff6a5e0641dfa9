"""
Tema visual y configuracion de colores para MedForecast
"""

# Colores del sistema
COLORS = {
    # Fondos
    "bg_primary": "#F7F7F7",
    "bg_secondary": "#F2F2F2",      # Encabezados de tabla, botones deshabilitados

    # Colores primarios
    "primary": "#007BFF",
    "chart_bar": "#35A2EB",         # Barras del grafico de uso

    # Estados semanticos
    "success": "#28A745",
    "warning": "#856404",           # Texto del panel de advertencias
    "warning_bg": "#FFF3CD",
    "warning_border": "#FFEEBA",
    "danger": "#FF3B30",

    # Grises
    "text_primary": "#1F1F21",
    "text_secondary": "#8E8E93",
    "text_muted": "#666666",
    "border": "#DDDDDD",
    "grid_color": "rgba(199, 199, 204, 0.3)",
}


def color_con_alpha(color_key: str, alpha: float = 0.2) -> str:
    """
    Convierte un color HEX de COLORS a RGBA con alpha especificado.
    Util para fillcolor de graficos Plotly.

    Args:
        color_key: Clave del color en COLORS dict
        alpha: Valor de opacidad (0.0 - 1.0)

    Returns:
        String RGBA, ej: "rgba(53, 162, 235, 0.5)"
    """
    hex_color = COLORS.get(color_key, '#007BFF')
    hex_color = hex_color.lstrip('#')
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


# Template de Plotly
PLOTLY_TEMPLATE = {
    "layout": {
        "paper_bgcolor": "rgba(0, 0, 0, 0)",
        "plot_bgcolor": "rgba(0, 0, 0, 0)",
        "font": {
            "color": "#1F1F21",
            "family": "Inter, system-ui, sans-serif",
            "size": 13
        },
        "title": {
            "font": {"color": "#1F1F21", "size": 17}
        },
        "xaxis": {
            "gridcolor": "rgba(60, 60, 67, 0.08)",
            "linecolor": "rgba(60, 60, 67, 0.12)",
            "tickfont": {"color": "#8E8E93", "size": 11}
        },
        "yaxis": {
            "gridcolor": "rgba(60, 60, 67, 0.08)",
            "linecolor": "rgba(60, 60, 67, 0.12)",
            "zerolinecolor": "rgba(60, 60, 67, 0.12)",
            "tickfont": {"color": "#8E8E93", "size": 11}
        },
        "legend": {
            "bgcolor": "rgba(255, 255, 255, 0.92)",
            "font": {"color": "#1F1F21", "size": 12}
        },
        "margin": {"l": 48, "r": 16, "t": 48, "b": 48}
    }
}

# Estilos compartidos de botones de paginacion
ESTILO_BOTON_PAGINA = {
    "padding": "5px 10px",
    "border": "none",
    "borderRadius": "4px",
}
