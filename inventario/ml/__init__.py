"""
Modulo de Prediccion para Inventario
====================================
Clasificacion de tendencias y proyeccion de ventas por producto
"""
from .tendencias import (
    forecast_product,
    forecast_catalog,
    build_trend_series,
    classify_trend,
    project_sales,
    FORECAST_HORIZON
)

__all__ = [
    'forecast_product',
    'forecast_catalog',
    'build_trend_series',
    'classify_trend',
    'project_sales',
    'FORECAST_HORIZON'
]
