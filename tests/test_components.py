from dash import html
import dash_bootstrap_components as dbc

from inventario.callbacks.inventario.catalogo import calcular_kpis, construir_filas, renderizar_snapshot
from inventario.callbacks.inventario.tendencias import series_del_snapshot
from inventario.components.icons import lucide_icon, trend_icon
from inventario.components.trend_panel import crear_panel_tendencias, crear_tarjeta_tendencia
from inventario.data.models import Trend, TrendSeries
from inventario.layouts.components import connection_badge, empty_state, kpi_card
from inventario.services import runtime
from inventario.utils.config import AppConfig
from inventario.utils.plotly_helpers import crear_figura_tendencia, crear_figura_vacia


def test_trend_figure_has_actual_and_predicted_traces():
    fig = crear_figura_tendencia(TrendSeries(actual=(12, 15, 18, 22, 25, 28), predicted=(31, 34, 37)))

    assert len(fig.data) == 2
    reales, predichas = fig.data
    assert tuple(reales.x) == tuple(predichas.x)
    assert tuple(reales.x)[-1] == "Semana +3"
    assert tuple(reales.y) == (12, 15, 18, 22, 25, 28, None, None, None)
    assert tuple(predichas.y) == (None,) * 6 + (31, 34, 37)
    assert predichas.line.dash == "dash"


def test_trend_figure_without_series_is_empty():
    fig = crear_figura_tendencia(None)
    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == "Producto no disponible"


def test_empty_figure_message():
    assert crear_figura_vacia("Nada").layout.annotations[0].text == "Nada"


def test_table_rows_join_products_and_predictions(store):
    snap = store.snapshot()
    filas = construir_filas(snap.filtered_catalog, snap.filtered_predictions)

    assert [f["id"] for f in filas] == [1, 2, 3, 4, 5]
    laptop = filas[0]
    assert laptop["category_label"] == "Electrónica"
    assert laptop["trend"] == "rising"
    assert laptop["trend_label"] == "En alza"
    assert laptop["confidence_label"] == "67%"
    assert laptop["predicted_label"] == "31, 34, 37"
    assert laptop["sales_data"] == [12, 15, 18, 22, 25, 28]


def test_kpis_of_seed_catalog(store):
    snap = store.snapshot()
    assert calcular_kpis(snap.filtered_catalog, snap.filtered_predictions) == (
        "5", "470", "USD 89.745,30", "5"
    )


def test_kpis_follow_filters(store):
    snap = store.set_filters("", "sports")
    assert calcular_kpis(snap.filtered_catalog, snap.filtered_predictions)[:2] == ("1", "200")


def test_render_snapshot_outputs(store):
    salidas = renderizar_snapshot(store.snapshot())
    assert len(salidas) == 7
    assert len(salidas[0]) == 5
    assert salidas[6].startswith("Última actualización: 12:00:00")


def test_series_come_from_the_same_snapshot(store):
    snap = store.set_filters("watch", "all")
    series = series_del_snapshot(snap)
    assert list(series) == [4]
    assert series[4].actual == (18, 22, 25, 28, 32, 35)


def test_trend_panel(store):
    snap = store.snapshot()
    panel = crear_panel_tendencias(snap.predictions, series_del_snapshot(snap))
    assert isinstance(panel, dbc.Row)
    assert len(panel.children) == 5

    assert isinstance(crear_panel_tendencias([]), html.Div)


def test_trend_card_without_series_has_no_graph(store):
    prediccion = store.snapshot().predictions[0]
    tarjeta = crear_tarjeta_tendencia(prediccion)
    assert len(tarjeta.children.children) == 4


def test_icons():
    icono = lucide_icon("no-existe", size="lg", id="icono-x")
    assert icono.id == "icono-x"
    assert icono.style["width"] == "20px"
    assert "%23FF3B30" in trend_icon(Trend.FALLING).children.src


def test_connection_badge():
    assert connection_badge(True).color == "success"
    assert connection_badge(False).color == "danger"


def test_layout_helpers():
    card = kpi_card("Productos", "5", valor_id="kpi-x", tooltip="Ayuda", tooltip_id="tip-x")
    assert isinstance(card, html.Div)
    assert isinstance(empty_state(variant="search"), html.Div)


def test_runtime_initialization():
    store = runtime.init_runtime(AppConfig(autoconnect=False, feed_seed=1, feed_interval=3600))
    try:
        assert runtime.get_store() is store
        assert len(store.snapshot().catalog) == 5
        assert not runtime.get_feed().is_running
    finally:
        runtime.shutdown_runtime()


def test_runtime_autoconnect():
    store = runtime.init_runtime(AppConfig(autoconnect=True, feed_interval=3600))
    try:
        assert runtime.get_feed().is_running
        assert store.snapshot().is_connected
    finally:
        runtime.shutdown_runtime()
    assert not store.snapshot().is_connected


def test_inventario_is_a_namespace_package():
    import inventario

    assert getattr(inventario, "__file__", None) is None
    assert len(list(inventario.__path__)) >= 1
