"""
Excepciones Personalizadas para MedForecast
Define excepciones especificas para el manejo de errores del dashboard.
"""


class MedForecastError(Exception):
    """
    Excepcion base para la aplicacion MedForecast.
    Todas las excepciones personalizadas heredan de esta.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Detalles: {self.details}"
        return self.message


# ============================================================================
# Excepciones de Conexion Externa
# ============================================================================

class ExternalConnectionError(MedForecastError):
    """Excepcion base para errores de conexion externa"""
    pass


class APIError(ExternalConnectionError):
    """Error en llamadas al servicio de forecast"""

    def __init__(self, message: str, endpoint: str = None, status_code: int = None):
        details = {}
        if endpoint:
            details['endpoint'] = endpoint
        if status_code:
            details['status_code'] = status_code
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(message, details)


class NetworkFailureError(APIError):
    """La peticion no se completo o el servicio respondio con un status no 2xx"""
    pass


# ============================================================================
# Excepciones de Validacion
# ============================================================================

class ValidationError(MedForecastError):
    """Excepcion base para errores de validacion"""
    pass


class ShapeMismatchError(ValidationError):
    """La respuesta del servicio no tiene la forma esperada"""

    def __init__(self, message: str, endpoint: str = None, expected: str = None):
        details = {}
        if endpoint:
            details['endpoint'] = endpoint
        if expected:
            details['expected'] = expected
        self.endpoint = endpoint
        super().__init__(message, details)


class ConfigurationError(ValidationError):
    """Error en la configuracion del sistema"""
    pass


# ============================================================================
# Excepciones de Procesamiento
# ============================================================================

class ProcessingError(MedForecastError):
    """Excepcion base para errores de procesamiento"""
    pass


class DateParseError(ProcessingError):
    """No se pudo interpretar una fecha del servicio"""

    def __init__(self, message: str, raw: str = None):
        details = {}
        if raw is not None:
            details['raw'] = str(raw)[:100]  # Truncar
        super().__init__(message, details)
