"""
Funciones de formateo para MedForecast
"""
from typing import Union


def formato_decimal(valor: Union[float, int], decimales: int = 2) -> str:
    """
    Formatea un valor con cantidad fija de decimales, sin separador de miles.

    Args:
        valor: Valor numérico
        decimales: Cantidad de decimales

    Returns:
        String formateado, ej: 10.5 -> "10.50"
    """
    if valor is None:
        return f"{0:.{decimales}f}"

    try:
        return f"{float(valor):.{decimales}f}"
    except (TypeError, ValueError):
        return str(valor)


def formato_pagina(pagina: int, total_paginas: int) -> str:
    """Texto del indicador de paginacion"""
    return f"Page {pagina} of {total_paginas}"

