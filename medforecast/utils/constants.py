"""
Constantes centralizadas del proyecto MedForecast
=================================================
Evita duplicacion de valores en multiples archivos.
"""

# ============================================================================
# Periodos de forecast
# ============================================================================

PERIODOS = [
    {"label": "Monthly", "value": "monthly"},
    {"label": "Weekly", "value": "weekly"},
    {"label": "Daily", "value": "daily"},
]

PLACEHOLDER_PERIODO = "--Choose Time Period--"
PLACEHOLDER_MEDICINA = "--Choose Medicine--"
PLACEHOLDER_REGION = "--Select State--"


# ============================================================================
# Tabla y paginacion
# ============================================================================

# Filas por pagina de la tabla de forecast
ITEMS_PER_PAGE = 10

MENSAJE_SIN_DATOS = "No forecast data available"


# ============================================================================
# Grafico
# ============================================================================

NOMBRE_SERIE_GRAFICO = "Medicine Usage"
TITULO_GRAFICO = "Medicine Usage Forecast"
TITULO_EJE_X = "Date"
TITULO_EJE_Y = "Amount"


# ============================================================================
# Fechas
# ============================================================================

# Nombres en ingles fijos: no dependen del locale del proceso
NOMBRES_MESES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


# ============================================================================
# Endpoints del servicio de forecast (relativos al prefijo de la API)
# ============================================================================

ENDPOINT_MEDICINAS = "/medicines"
ENDPOINT_REGIONES = "/states"
ENDPOINT_CATALOGO = "/all_forecasts"
ENDPOINT_STOCK = "/stock"
ENDPOINT_FORECAST = "/forecast"
ENDPOINT_SELECCION = "/selection"
ENDPOINT_RECALCULO = "/all_forecast_post"
