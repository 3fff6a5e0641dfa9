"""
Medicine Forecast - Dashboard de Forecast de Medicinas
======================================================
Aplicacion Dash que consume el servicio remoto de forecast
"""
import os
import sys
from dash import Dash, html, dcc
import dash_bootstrap_components as dbc
from loguru import logger

# Configuracion de logging
logger.remove()
logger.add(
    sys.stdout,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
    level=os.getenv("LOG_LEVEL", "INFO"),
    colorize=True
)

# Inicializar la aplicacion Dash
app = Dash(
    __name__,
    external_stylesheets=[
        dbc.themes.BOOTSTRAP,
        dbc.icons.FONT_AWESOME,
    ],
    suppress_callback_exceptions=True,
    title="Medicine Forecast",
    update_title="Loading..."
)

server = app.server

# Importar paginas
from medforecast.pages import dashboard

# Importar callbacks
from medforecast.callbacks import dashboard_callbacks  # noqa: F401

app.layout = html.Div([
    dcc.Location(id="url", refresh=False),
    html.H1("Medicine Forecast", className="text-center mt-4"),
    dashboard.layout,
], style={"backgroundColor": "#f8f9fa", "minHeight": "100vh"})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8050))
    debug = os.environ.get("FLASK_ENV", "development") == "development"

    logger.info(f"Iniciando Medicine Forecast en puerto {port}")
    # use_reloader=False evita doble ejecucion de callbacks en modo debug
    app.run(debug=debug, host="0.0.0.0", port=port, use_reloader=False)
