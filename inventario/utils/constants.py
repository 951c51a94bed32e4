"""
Constantes centralizadas del proyecto Inventario
=================================================
Evita duplicacion de valores en multiples archivos.
"""

# ============================================================================
# Categorias de productos
# ============================================================================

CATEGORY_ALL = 'all'
CATEGORY_DEFAULT = 'general'

CATEGORIAS = {
    'electronics': {
        'nombre': 'Electrónica',
        'tooltip': 'Laptops, auriculares, relojes inteligentes y accesorios.'
    },
    'clothing': {
        'nombre': 'Ropa',
        'tooltip': 'Indumentaria y calzado.'
    },
    'sports': {
        'nombre': 'Deportes',
        'tooltip': 'Equipamiento deportivo y fitness.'
    },
    'general': {
        'nombre': 'General',
        'tooltip': 'Productos sin categoria especifica.'
    },
}


def obtener_opciones_categorias(incluir_todas: bool = True) -> list:
    """
    Genera opciones para dropdown de categorias.

    Args:
        incluir_todas: Si agregar la opcion comodin "Todas las categorias"

    Returns:
        Lista de dicts con label, value y title para dropdown
    """
    opciones = [
        {
            "label": info['nombre'],
            "value": codigo,
            "title": info['tooltip']
        }
        for codigo, info in CATEGORIAS.items()
    ]
    if incluir_todas:
        opciones.insert(0, {"label": "Todas las categorías", "value": CATEGORY_ALL})
    return opciones


def obtener_nombre_categoria(codigo: str) -> str:
    """Obtiene el nombre legible de una categoria por su codigo"""
    categoria = CATEGORIAS.get(codigo)
    return categoria['nombre'] if categoria else codigo


# ============================================================================
# Ventana de ventas y horizonte de prediccion
# ============================================================================

# Largo de la ventana movil de ventas (periodos, del mas antiguo al mas reciente)
VENTANA_VENTAS = 6

# Periodos futuros a predecir
HORIZONTE_FORECAST = 3


# ============================================================================
# Feed simulado en tiempo real
# ============================================================================

# Intervalo entre mutaciones del feed (segundos)
INTERVALO_FEED_DEFAULT = 5.0

# Probabilidad de que una mutacion descuente una unidad de stock
PROB_BAJA_STOCK = 0.3

# Probabilidad de que una mutacion registre una nueva venta en la ventana
PROB_NUEVA_VENTA = 0.2

# Rango (inclusive) de ventas simuladas por periodo
RANGO_VENTA_SIMULADA = (1, 10)

# Intervalo de refresco del panel (milisegundos)
INTERVALO_REFRESCO_UI_MS = 1000
