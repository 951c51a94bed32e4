"""
Callbacks de la seccion de tendencias.
"""
from typing import Dict

from dash import callback, Output, Input

from inventario.components.trend_panel import crear_panel_tendencias
from inventario.data.models import DashboardSnapshot, TrendSeries
from inventario.ml.tendencias import build_trend_series
from inventario.services.runtime import get_store


def series_del_snapshot(snap: DashboardSnapshot) -> Dict[int, TrendSeries]:
    """Series real + predicha de los productos visibles, del mismo snapshot"""
    productos = {p.id: p for p in snap.filtered_catalog}
    return {
        t.product_id: build_trend_series(productos[t.product_id], t)
        for t in snap.filtered_predictions
        if t.product_id in productos
    }


@callback(
    Output("contenedor-tendencias", "children"),
    Input("store-version", "data"),
    Input("switch-tendencias", "value"),
)
def renderizar_tendencias(version, mostrar):
    """Tarjetas de tendencia de la vista filtrada (ocultas si el switch esta apagado)"""
    if not mostrar:
        return None

    snap = get_store().snapshot()
    return crear_panel_tendencias(snap.filtered_predictions, series_del_snapshot(snap))
