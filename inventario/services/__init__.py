"""
Capa de Servicios para Inventario

Estado del panel, feed en tiempo real y vista filtrada,
separados de los callbacks de Dash.
"""

from .store import InventoryStore
from .feed import LiveFeed, mutate_product
from .filters import filter_catalog, filter_predictions, build_filtered_view

__all__ = [
    'InventoryStore',
    'LiveFeed',
    'mutate_product',
    'filter_catalog',
    'filter_predictions',
    'build_filtered_view'
]
