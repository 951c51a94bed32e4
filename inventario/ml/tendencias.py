"""
Motor de Tendencias de Ventas
=============================
Clasifica la tendencia de cada producto (rising / falling / stable) comparando
el promedio de los ultimos 3 periodos contra los 3 anteriores, y proyecta los
proximos periodos con una pendiente lineal sobre los 3 puntos mas recientes.

Todas las funciones son puras: sin estado oculto ni I/O, de modo que pueden
ejecutarse en cada cambio del catalogo sin coordinacion.

Ejemplo:
    >>> p = Product(id=1, name="Laptop", price=1299.99, stock=45,
    ...             category="electronics", sales_data=(12, 15, 18, 22, 25, 28),
    ...             last_updated=datetime.now())
    >>> pred = forecast_product(p)
    >>> pred.current_trend, round(pred.confidence, 3), pred.predicted_sales
    (<Trend.RISING: 'rising'>, 0.667, (31, 34, 37))
"""
import math
from typing import Iterable, Sequence, Tuple

import numpy as np

from inventario.data.models import Product, Trend, TrendPrediction, TrendSeries
from inventario.utils.constants import HORIZONTE_FORECAST

FORECAST_HORIZON = HORIZONTE_FORECAST
RISING_FACTOR = 1.2
FALLING_FACTOR = 0.8
MAX_CONFIDENCE = 0.95
DEFAULT_CONFIDENCE = 0.5

# Puntos por bloque de comparacion (recientes / anteriores)
_BLOQUE = 3


def _split_window(sales: Sequence[int]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Separa la ventana en (recientes, anteriores).

    Con menos de 6 puntos no hay bloque anterior y se usan ceros.
    Con menos de 3 puntos los recientes se completan con ceros a la izquierda.
    """
    ventana = tuple(int(v) for v in sales)
    if len(ventana) < _BLOQUE:
        ventana = (0,) * (_BLOQUE - len(ventana)) + ventana

    recientes = ventana[-_BLOQUE:]
    if len(ventana) >= 2 * _BLOQUE:
        anteriores = ventana[-2 * _BLOQUE:-_BLOQUE]
    else:
        anteriores = (0,) * _BLOQUE
    return recientes, anteriores


def classify_trend(recent_avg: float, previous_avg: float) -> Tuple[Trend, float]:
    """
    Clasifica la tendencia y calcula la confianza.

    Sin promedio anterior (cero) no hay señal: stable con confianza 0.5.

    Returns:
        Tuple (tendencia, confianza)
    """
    if previous_avg == 0:
        return Trend.STABLE, DEFAULT_CONFIDENCE

    if recent_avg > previous_avg * RISING_FACTOR:
        return Trend.RISING, min(MAX_CONFIDENCE, (recent_avg - previous_avg) / previous_avg)
    if recent_avg < previous_avg * FALLING_FACTOR:
        return Trend.FALLING, min(MAX_CONFIDENCE, (previous_avg - recent_avg) / previous_avg)
    return Trend.STABLE, DEFAULT_CONFIDENCE


def project_sales(recent: Sequence[int], horizon: int = FORECAST_HORIZON) -> Tuple[int, ...]:
    """
    Proyecta ventas futuras con la secante de 2 pasos sobre los 3 puntos recientes.

    Los valores se redondean al entero mas cercano (mitades hacia arriba)
    y nunca son negativos.
    """
    pendiente = (recent[2] - recent[0]) / 2
    return tuple(
        max(0, math.floor(recent[2] + pendiente * k + 0.5))
        for k in range(1, horizon + 1)
    )


def forecast_product(product: Product) -> TrendPrediction:
    """Calcula la prediccion de tendencia de un producto"""
    recientes, anteriores = _split_window(product.sales_data)

    recent_avg = float(np.mean(recientes))
    previous_avg = float(np.mean(anteriores))

    tendencia, confianza = classify_trend(recent_avg, previous_avg)

    return TrendPrediction(
        product_id=product.id,
        product_name=product.name,
        current_trend=tendencia,
        confidence=confianza,
        predicted_sales=project_sales(recientes),
    )


def forecast_catalog(products: Iterable[Product]) -> Tuple[TrendPrediction, ...]:
    """
    Calcula predicciones para todo el catalogo.

    Args:
        products: Catalogo completo (orden significativo)

    Returns:
        Una prediccion por producto, en el mismo orden y con los mismos ids
    """
    return tuple(forecast_product(p) for p in products)


def build_trend_series(product: Product, prediction: TrendPrediction) -> TrendSeries:
    """
    Arma la serie real + predicha para graficar un producto.

    Raises:
        ValueError: Si la prediccion no corresponde al producto
    """
    if prediction.product_id != product.id:
        raise ValueError(
            f"Prediccion de producto {prediction.product_id} no corresponde a {product.id}"
        )
    return TrendSeries(actual=tuple(product.sales_data), predicted=tuple(prediction.predicted_sales))
