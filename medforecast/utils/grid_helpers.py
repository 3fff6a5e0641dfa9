"""
AG Grid Column Definition Factory Functions

Reusable factory functions for the AG Grid column definitions used by the
forecast table.

Usage:
    from medforecast.utils.grid_helpers import col_text

    column_defs = [
        col_text("date", "Date", 220),
        col_text("value", "Forecast Value", 160, align="right"),
    ]
"""

from typing import Optional, Dict, Any, List


def col_text(
    field: str,
    header: str,
    width: Optional[int] = None,
    filter: bool = False,
    align: Optional[str] = None,
    **kwargs
) -> Dict[str, Any]:
    """
    Create a basic text column definition.

    Values arrive pre-formatted, so no valueFormatter is attached and the
    grid's own sorting is disabled to keep the service order.

    Args:
        field: The field name from the data
        header: Display name for the column header
        width: Column width in pixels (None lets the column flex)
        filter: Enable column filtering
        align: Optional text alignment ("left", "right", "center")
        **kwargs: Additional AG Grid column properties

    Returns:
        Column definition dictionary

    Example:
        >>> col_text("date", "Date", 220)
    """
    col_def = {
        "field": field,
        "headerName": header,
        "filter": filter,
        "sortable": False,
    }

    if width is None:
        col_def["flex"] = 1
    else:
        col_def["width"] = width

    if align:
        col_def["cellStyle"] = {"textAlign": align}

    col_def.update(kwargs)
    return col_def


def default_col_def(**kwargs) -> Dict[str, Any]:
    """Default column definition shared by every column of a grid."""
    col_def = {"resizable": True, "suppressMovable": True}
    col_def.update(kwargs)
    return col_def


def column_defs_forecast() -> List[Dict[str, Any]]:
    """Columns of the forecast table: Date and Forecast Value."""
    return [
        col_text("date", "Date"),
        col_text("value", "Forecast Value", align="right"),
    ]
