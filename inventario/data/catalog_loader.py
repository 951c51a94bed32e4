"""
Cargador del Catalogo de Productos
==================================
Catalogo de demostracion e importacion de catalogos desde CSV o Excel
subidos con dcc.Upload.

Formato esperado (una fila por producto):
    id, name, price, stock, category, sales_data[, image_url, description]

sales_data es la ventana de ventas del mas antiguo al mas reciente,
separada por ';' (ej: "12;15;18;22;25;28").
"""
import base64
import binascii
import io
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from inventario.data.models import Product
from inventario.utils.constants import CATEGORY_DEFAULT, VENTANA_VENTAS
from inventario.utils.exceptions import DataValidationError, FileValidationError
from inventario.utils.logger import get_logger
from inventario.utils.validators import (
    validate_file_extension,
    validate_integer,
    validate_positive,
)

logger = get_logger(__name__)

COLUMNAS_REQUERIDAS = ['id', 'name', 'price', 'stock', 'sales_data']
COLUMNAS_OPCIONALES = {
    'category': CATEGORY_DEFAULT,
    'image_url': '',
    'description': '',
}

# Catalogo de demostracion
_PRODUCTOS_DEMO = [
    (1, 'Premium Laptop', 1299.99, 45, 'electronics', (12, 15, 18, 22, 25, 28)),
    (2, 'Wireless Headphones', 199.99, 120, 'electronics', (45, 38, 42, 50, 55, 60)),
    (3, 'Running Shoes', 89.99, 75, 'clothing', (30, 25, 28, 32, 35, 40)),
    (4, 'Smart Watch', 349.99, 30, 'electronics', (18, 22, 25, 28, 32, 35)),
    (5, 'Yoga Mat', 49.99, 200, 'sports', (15, 20, 25, 30, 35, 40)),
]


def load_seed_catalog(now: datetime = None) -> Tuple[Product, ...]:
    """
    Catalogo inicial de demostracion.

    Args:
        now: Marca de tiempo para last_updated (default: datetime.now())
    """
    ahora = now or datetime.now()
    return tuple(
        Product(
            id=pid,
            name=nombre,
            price=precio,
            stock=stock,
            category=categoria,
            sales_data=ventas,
            last_updated=ahora,
            image_url=f"https://picsum.photos/300/200?random={pid}",
        )
        for pid, nombre, precio, stock, categoria, ventas in _PRODUCTOS_DEMO
    )


def decodificar_archivo(contents: str, filename: str) -> Optional[bytes]:
    """
    Decodifica el contenido del archivo subido desde base64.

    Args:
        contents: Contenido en formato base64 (data:...;base64,...)
        filename: Nombre del archivo

    Returns:
        Bytes del archivo o None si hay error
    """
    try:
        _, content_string = contents.split(',', 1)
        return base64.b64decode(content_string)
    except (AttributeError, ValueError, binascii.Error) as e:
        logger.error(f"Error decodificando archivo {filename}: {e}")
        return None


def normalizar_columnas(df: pd.DataFrame) -> pd.DataFrame:
    """Normaliza nombres de columnas a minusculas y sin espacios"""
    df.columns = [str(col).lower().strip() for col in df.columns]
    return df


def parsear_ventana(valor: Any) -> Tuple[int, ...]:
    """
    Convierte "12;15;18" (o una lista) en una tupla de enteros no negativos.

    Raises:
        ValueError: Si algun valor no es entero no negativo
    """
    if isinstance(valor, (list, tuple)):
        partes = list(valor)
    else:
        partes = [p for p in str(valor).replace(',', ';').split(';') if p.strip()]

    ventas = []
    for parte in partes:
        numero = float(parte)
        if numero < 0 or not numero.is_integer():
            raise ValueError(f"venta invalida: {parte}")
        ventas.append(int(numero))
    return tuple(ventas)


def dataframe_a_productos(df: pd.DataFrame, now: datetime = None) -> Tuple[List[Product], List[str]]:
    """
    Convierte un DataFrame de catalogo en productos.

    Las filas invalidas se reportan y se omiten.

    Returns:
        Tuple (productos, errores)
    """
    ahora = now or datetime.now()
    df = normalizar_columnas(df.copy())

    faltantes = [c for c in COLUMNAS_REQUERIDAS if c not in df.columns]
    if faltantes:
        return [], [f"Falta columna requerida '{c}'" for c in faltantes]

    for col, default in COLUMNAS_OPCIONALES.items():
        if col not in df.columns:
            df[col] = default
        else:
            df[col] = df[col].fillna(default).astype(str).str.strip()

    productos: List[Product] = []
    errores: List[str] = []
    ids_vistos = set()

    for fila, registro in enumerate(df.to_dict('records'), start=2):
        try:
            pid = validate_integer(registro['id'], "id", min_value=1)
            if pid in ids_vistos:
                raise ValueError(f"id duplicado: {pid}")
            nombre = str(registro['name']).strip()
            if not nombre or nombre.lower() == 'nan':
                raise ValueError("nombre vacio")
            precio = validate_positive(registro['price'], "price")
            stock = validate_integer(registro['stock'], "stock", min_value=0)
            ventas = parsear_ventana(registro['sales_data'])
            if len(ventas) != VENTANA_VENTAS:
                raise ValueError(f"sales_data debe tener {VENTANA_VENTAS} periodos")
        except DataValidationError as e:
            errores.append(f"Fila {fila}: {e.message}")
            continue
        except (TypeError, ValueError) as e:
            errores.append(f"Fila {fila}: {e}")
            continue

        ids_vistos.add(pid)
        productos.append(Product(
            id=pid,
            name=nombre,
            price=precio,
            stock=stock,
            category=registro['category'] or CATEGORY_DEFAULT,
            sales_data=ventas,
            last_updated=ahora,
            image_url=registro['image_url'],
            description=registro['description'],
        ))

    return productos, errores


def cargar_catalogo_desde_upload(contents: str, filename: str) -> Dict[str, Any]:
    """
    Carga y valida un catalogo subido (CSV o Excel).

    Args:
        contents: Contenido del archivo en base64
        filename: Nombre del archivo

    Returns:
        {
            'success': bool,
            'productos': lista de Product,
            'errores': lista de errores de validacion
        }
    """
    resultado = {
        'success': False,
        'productos': [],
        'errores': []
    }

    try:
        extension = validate_file_extension(filename)
    except FileValidationError as e:
        resultado['errores'].append(e.message)
        return resultado

    decoded = decodificar_archivo(contents, filename)
    if decoded is None:
        resultado['errores'].append("No se pudo decodificar el archivo")
        return resultado

    try:
        if extension == 'csv':
            df = pd.read_csv(io.BytesIO(decoded), dtype={'sales_data': str})
        else:
            df = pd.read_excel(io.BytesIO(decoded), dtype={'sales_data': str})
    except Exception as e:
        logger.error(f"Error leyendo {filename}: {e}")
        resultado['errores'].append(f"Error procesando archivo: {str(e)}")
        return resultado

    productos, errores = dataframe_a_productos(df)
    resultado['productos'] = productos
    resultado['errores'] = errores

    if not productos and not errores:
        resultado['errores'].append("El archivo no contiene productos")

    # Importacion parcial no permitida: el catalogo se reemplaza entero
    if productos and not errores:
        resultado['success'] = True
        logger.info(f"Catalogo importado desde {filename}: {len(productos)} productos")
    else:
        logger.warning(f"Catalogo {filename} rechazado: {len(errores)} errores")

    return resultado
