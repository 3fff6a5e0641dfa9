"""
Capa de Servicios para MedForecast

Acceso al servicio remoto de forecast y orquestacion del estado
del dashboard, separados de los callbacks de Dash.
"""

from .forecast_repository import ForecastRepository, RepositoryResult
from .orchestrator import DashboardState, OrchestratorController, ViewModel

__all__ = [
    'ForecastRepository', 'RepositoryResult',
    'DashboardState', 'OrchestratorController', 'ViewModel',
]
