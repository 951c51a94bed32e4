"""
Modelos de Datos del Inventario
===============================
Productos, borradores de alta y predicciones de tendencia.

Los productos son valores inmutables: toda mutacion produce un nuevo
Product mediante dataclasses.replace.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from inventario.utils.constants import CATEGORY_ALL, CATEGORY_DEFAULT


class Trend(str, Enum):
    """Clasificacion de tendencia de ventas"""
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


@dataclass(frozen=True)
class Product:
    """Producto del catalogo con su ventana movil de ventas"""
    id: int
    name: str
    price: float
    stock: int
    category: str
    sales_data: Tuple[int, ...]
    last_updated: datetime
    image_url: str = ""
    description: str = ""

    def __post_init__(self):
        # Acepta listas desde formularios o JSON
        if not isinstance(self.sales_data, tuple):
            object.__setattr__(self, 'sales_data', tuple(self.sales_data))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'stock': self.stock,
            'category': self.category,
            'sales_data': list(self.sales_data),
            'last_updated': self.last_updated.isoformat(),
            'image_url': self.image_url,
            'description': self.description,
        }


@dataclass(frozen=True)
class ProductDraft:
    """Datos ingresados por el operador para dar de alta un producto"""
    name: str
    price: float
    stock: int = 0
    category: str = CATEGORY_DEFAULT
    image_url: str = ""
    description: str = ""


@dataclass(frozen=True)
class TrendPrediction:
    """Prediccion derivada para un producto, identificada solo por product_id"""
    product_id: int
    product_name: str
    current_trend: Trend
    confidence: float
    predicted_sales: Tuple[int, ...]


@dataclass(frozen=True)
class TrendSeries:
    """
    Serie para graficar: ventas reales y prediccion.

    La prediccion ocupa los periodos inmediatamente posteriores
    a la ventana real.
    """
    actual: Tuple[int, ...]
    predicted: Tuple[int, ...]

    def labels(self) -> List[str]:
        """Etiquetas del eje temporal (ventana real + horizonte)"""
        n_actual = len(self.actual)
        pasado = [f"Semana -{n_actual - 1 - i}" for i in range(n_actual - 1)]
        if n_actual:
            pasado.append("Actual")
        futuro = [f"Semana +{k}" for k in range(1, len(self.predicted) + 1)]
        return pasado + futuro

    def aligned(self) -> Tuple[List[Optional[int]], List[Optional[int]]]:
        """
        Alinea ambas series sobre el mismo eje.

        Returns:
            Tuple (reales, predichas) de igual largo, rellenadas con None
        """
        reales = list(self.actual) + [None] * len(self.predicted)
        predichas = [None] * len(self.actual) + list(self.predicted)
        return reales, predichas


class ConnectionStatus(str, Enum):
    """Estado del feed en tiempo real"""
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass(frozen=True)
class DashboardSnapshot:
    """
    Vista consistente y de solo lectura del estado del panel.

    catalog y predictions siempre provienen del mismo commit.
    """
    catalog: Tuple[Product, ...] = ()
    predictions: Tuple[TrendPrediction, ...] = ()
    filtered_catalog: Tuple[Product, ...] = ()
    filtered_predictions: Tuple[TrendPrediction, ...] = ()
    connection_status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    search_term: str = ""
    category: str = CATEGORY_ALL
    version: int = 0

    @property
    def is_connected(self) -> bool:
        return self.connection_status is ConnectionStatus.CONNECTED
