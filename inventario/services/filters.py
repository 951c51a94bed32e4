"""
Vista Filtrada del Catalogo
===========================
Filtra productos por nombre y categoria, y deriva las predicciones visibles
exclusivamente de los productos filtrados (nunca hay predicciones huerfanas).
"""
from typing import Iterable, Optional, Tuple

from inventario.data.models import Product, TrendPrediction
from inventario.utils.constants import CATEGORY_ALL


def filter_catalog(
    products: Iterable[Product],
    search_term: Optional[str] = "",
    category: Optional[str] = CATEGORY_ALL
) -> Tuple[Product, ...]:
    """
    Filtra el catalogo por nombre y categoria.

    Args:
        products: Catalogo completo
        search_term: Subcadena a buscar en el nombre (sin distinguir mayusculas)
        category: Categoria exacta, o "all" para no filtrar

    Returns:
        Productos que cumplen ambos criterios, en el orden del catalogo
    """
    termino = (search_term or "").lower()
    todas = not category or category == CATEGORY_ALL

    return tuple(
        p for p in products
        if termino in p.name.lower() and (todas or p.category == category)
    )


def filter_predictions(
    predictions: Iterable[TrendPrediction],
    products: Iterable[Product]
) -> Tuple[TrendPrediction, ...]:
    """Predicciones cuyo product_id esta en products (orden de predictions)"""
    ids = {p.id for p in products}
    return tuple(pred for pred in predictions if pred.product_id in ids)


def build_filtered_view(
    catalog: Iterable[Product],
    predictions: Iterable[TrendPrediction],
    search_term: Optional[str] = "",
    category: Optional[str] = CATEGORY_ALL
) -> Tuple[Tuple[Product, ...], Tuple[TrendPrediction, ...]]:
    """
    Calcula la vista filtrada completa.

    Returns:
        Tuple (productos_filtrados, predicciones_filtradas)
    """
    productos = filter_catalog(catalog, search_term, category)
    return productos, filter_predictions(predictions, productos)
