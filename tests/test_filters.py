from inventario.ml.tendencias import forecast_catalog
from inventario.services.filters import build_filtered_view, filter_catalog, filter_predictions


def test_filter_by_category(seed_catalog):
    """Filtrar por clothing deja solo las zapatillas."""
    productos = filter_catalog(seed_catalog, "", "clothing")
    assert [p.id for p in productos] == [3]


def test_filter_by_search_term_is_case_insensitive(seed_catalog):
    productos = filter_catalog(seed_catalog, "WATCH", "all")
    assert [p.name for p in productos] == ["Smart Watch"]


def test_filter_combines_search_and_category(seed_catalog):
    assert [p.id for p in filter_catalog(seed_catalog, "a", "electronics")] == [1, 2, 4]
    assert filter_catalog(seed_catalog, "laptop", "sports") == ()


def test_empty_filters_keep_catalog_order(seed_catalog):
    assert filter_catalog(seed_catalog, "", "all") == tuple(seed_catalog)
    assert filter_catalog(seed_catalog, None, None) == tuple(seed_catalog)


def test_filtered_predictions_follow_filtered_products(seed_catalog):
    predicciones = forecast_catalog(seed_catalog)
    productos, visibles = build_filtered_view(seed_catalog, predicciones, "", "electronics")

    assert {t.product_id for t in visibles} == {p.id for p in productos}
    assert [t.product_id for t in visibles] == [1, 2, 4]


def test_filter_predictions_drops_orphans(seed_catalog):
    predicciones = forecast_catalog(seed_catalog)
    assert filter_predictions(predicciones, seed_catalog[:2]) == predicciones[:2]
    assert filter_predictions(predicciones, ()) == ()
