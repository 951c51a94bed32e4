"""
Callbacks del catalogo: tabla, KPIs y estado de conexion.

El Interval consulta la version del store y solo re-renderiza cuando cambio.
"""
from typing import Any, Dict, List, Sequence, Tuple

from dash import callback, Output, Input, State, ctx
from dash.exceptions import PreventUpdate

from inventario.data.models import DashboardSnapshot, Product, Trend, TrendPrediction
from inventario.components.trend_panel import ETIQUETAS_TENDENCIA
from inventario.layouts.components import connection_badge
from inventario.services.runtime import get_store
from inventario.utils.constants import CATEGORY_ALL, obtener_nombre_categoria
from inventario.utils.formatters import (
    formato_confianza,
    formato_hora,
    formato_moneda,
    formato_numero,
)
from inventario.utils.logger import get_logger

logger = get_logger(__name__)


def construir_filas(
    productos: Sequence[Product],
    predicciones: Sequence[TrendPrediction]
) -> List[Dict[str, Any]]:
    """
    Filas de la tabla: producto + su prediccion vigente.

    Args:
        productos: Catalogo filtrado
        predicciones: Predicciones del mismo snapshot

    Returns:
        Lista de dicts para rowData de AgGrid
    """
    por_id = {p.product_id: p for p in predicciones}
    filas = []
    for producto in productos:
        fila = producto.to_dict()
        fila["category_label"] = obtener_nombre_categoria(producto.category)
        fila["last_updated_label"] = formato_hora(producto.last_updated)

        prediccion = por_id.get(producto.id)
        if prediccion is not None:
            tendencia = prediccion.current_trend.value
            fila["trend"] = tendencia
            fila["trend_label"] = ETIQUETAS_TENDENCIA.get(tendencia, tendencia)
            fila["confidence"] = prediccion.confidence
            fila["confidence_label"] = formato_confianza(prediccion.confidence)
            fila["predicted_label"] = ", ".join(str(v) for v in prediccion.predicted_sales)
        filas.append(fila)
    return filas


def calcular_kpis(
    productos: Sequence[Product],
    predicciones: Sequence[TrendPrediction]
) -> Tuple[str, str, str, str]:
    """KPIs de la vista: cantidad, unidades, valor de inventario y productos en alza"""
    unidades = sum(p.stock for p in productos)
    valor = sum(p.price * p.stock for p in productos)
    en_alza = sum(1 for t in predicciones if t.current_trend is Trend.RISING)
    return (
        formato_numero(len(productos)),
        formato_numero(unidades),
        formato_moneda(valor),
        formato_numero(en_alza),
    )


def renderizar_snapshot(snap: DashboardSnapshot) -> tuple:
    """Salidas del panel para un snapshot consistente"""
    filas = construir_filas(snap.filtered_catalog, snap.filtered_predictions)
    kpis = calcular_kpis(snap.filtered_catalog, snap.filtered_predictions)
    ultima = max((p.last_updated for p in snap.catalog), default=None)
    return (
        filas,
        *kpis,
        connection_badge(snap.is_connected),
        f"Última actualización: {formato_hora(ultima)}",
    )


@callback(
    Output("tabla-productos", "rowData"),
    Output("kpi-total-productos", "children"),
    Output("kpi-unidades-stock", "children"),
    Output("kpi-valor-inventario", "children"),
    Output("kpi-en-alza", "children"),
    Output("badge-conexion", "children"),
    Output("ultima-actualizacion", "children"),
    Output("store-version", "data"),
    Input("interval-refresco", "n_intervals"),
    Input("input-busqueda", "value"),
    Input("dropdown-categoria", "value"),
    State("store-version", "data"),
)
def refrescar_panel(n_intervals, busqueda, categoria, version_renderizada):
    """Re-renderiza tabla y KPIs cuando cambia la version del store o los filtros"""
    store = get_store()

    if ctx.triggered_id != "interval-refresco":
        store.set_filters(busqueda or "", categoria or CATEGORY_ALL)

    snap = store.snapshot()
    if snap.version == version_renderizada:
        raise PreventUpdate

    logger.debug(f"Renderizando panel (version {snap.version})")
    return (*renderizar_snapshot(snap), snap.version)
