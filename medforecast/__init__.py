"""
MedForecast - Dashboard de Forecast de Medicinas
================================================
Seleccion de medicina, region y periodo; grafico y tabla paginada del
forecast calculado por el servicio remoto, con advertencias de stock.
"""

__version__ = "1.0.0"
