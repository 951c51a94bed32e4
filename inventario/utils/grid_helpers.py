"""
AG Grid Column Definition Factory Functions

Reusable factory functions to create standardized AG Grid column definitions
for the inventory table.

Usage:
    from inventario.utils.grid_helpers import col_numeric, col_currency, col_text

    column_defs = [
        col_text("name", "Producto", 200),
        col_numeric("stock", "Stock", 100),
        col_currency("price", "Precio", 120),
    ]
"""

from typing import Optional, Dict, Any, Literal


# ============================================================================
# Core Column Factory Functions
# ============================================================================

def col_text(
    field: str,
    header: str,
    width: int = 120,
    filter: bool = True,
    **kwargs
) -> Dict[str, Any]:
    """
    Create a basic text column definition.

    Args:
        field: The field name from the data
        header: Display name for the column header
        width: Column width in pixels
        filter: Enable column filtering
        **kwargs: Additional AG Grid column properties

    Returns:
        Column definition dictionary
    """
    col_def = {
        "field": field,
        "headerName": header,
        "width": width,
        "filter": filter,
    }
    col_def.update(kwargs)
    return col_def


def col_numeric(
    field: str,
    header: str,
    width: int = 110,
    decimals: int = 0,
    highlighted: bool = False,
    highlight_color: str = "#007AFF",
    **kwargs
) -> Dict[str, Any]:
    """
    Create a numeric column with standardized formatting.

    Example:
        >>> col_numeric("stock", "Stock", 100)
        >>> col_numeric("confidence", "Confianza", 120, decimals=2, highlighted=True)
    """
    format_str = f",.{decimals}f"

    col_def = {
        "field": field,
        "headerName": header,
        "width": width,
        "type": "numericColumn",
        "valueFormatter": {"function": f"d3.format('{format_str}')(params.value)"}
    }

    if highlighted:
        col_def["cellStyle"] = {
            "fontWeight": "600",
            "color": highlight_color
        }

    col_def.update(kwargs)
    return col_def


def col_currency(
    field: str,
    header: str,
    width: int = 130,
    decimals: int = 2,
    symbol: str = "$",
    **kwargs
) -> Dict[str, Any]:
    """Create a currency column with standardized formatting."""
    format_str = f"{symbol},.{decimals}f"

    col_def = {
        "field": field,
        "headerName": header,
        "width": width,
        "type": "numericColumn",
        "valueFormatter": {"function": f"d3.format('{format_str}')(params.value)"}
    }

    col_def.update(kwargs)
    return col_def


def col_stock(
    field: str = "stock",
    header: str = "Stock",
    width: int = 100,
    low_threshold: int = 10,
    **kwargs
) -> Dict[str, Any]:
    """
    Stock column that highlights low and zero stock.

    Args:
        low_threshold: Values at or below this are painted as warning
    """
    col_def = col_numeric(field, header, width, **kwargs)
    col_def["cellStyle"] = {
        "styleConditions": [
            {"condition": "params.value === 0",
             "style": {"color": "#FF3B30", "fontWeight": "600"}},
            {"condition": f"params.value <= {low_threshold}",
             "style": {"color": "#FF9500", "fontWeight": "600"}},
        ]
    }
    return col_def


# ============================================================================
# Grid Configuration Helpers
# ============================================================================

def default_col_def(
    sortable: bool = True,
    resizable: bool = True,
    **kwargs
) -> Dict[str, Any]:
    """Create standardized default column definition options."""
    defaults = {
        "sortable": sortable,
        "resizable": resizable,
    }
    defaults.update(kwargs)
    return defaults


def grid_options(
    pagination: bool = True,
    page_size: int = 20,
    page_size_options: list = None,
    row_selection: Optional[Literal["single", "multiple"]] = None,
    animate_rows: bool = False,
    dom_layout: str = "normal",
    **kwargs
) -> Dict[str, Any]:
    """
    Create standardized grid options configuration.

    Example:
        >>> grid_options()
        >>> grid_options(row_selection="single", animate_rows=True)
    """
    if page_size_options is None:
        page_size_options = [10, 20, 50, 100]

    options = {
        "domLayout": dom_layout,
    }

    if pagination:
        options["pagination"] = True
        options["paginationPageSize"] = page_size
        options["paginationPageSizeSelector"] = page_size_options

    if row_selection:
        if row_selection == "single":
            options["rowSelection"] = {"mode": "singleRow"}
        else:  # multiple
            options["rowSelection"] = {"mode": "multiRow"}

        if animate_rows:
            options["animateRows"] = True

    options.update(kwargs)
    return options


# ============================================================================
# Column Set for the inventory table
# ============================================================================

def cols_inventario() -> list:
    """Columnas de la tabla de productos"""
    return [
        col_numeric("id", "ID", 80),
        col_text("name", "Producto", 200, flex=1),
        col_text("category_label", "Categoría", 130),
        col_currency("price", "Precio", 120),
        col_stock(),
        col_text("trend_label", "Tendencia", 120),
        col_text("confidence_label", "Confianza", 110, filter=False),
        col_text("predicted_label", "Próximos 3", 130, filter=False),
        col_text("last_updated_label", "Actualizado", 120, filter=False),
    ]
