"""
Validadores de Entrada para Inventario
Funciones para validar y sanitizar datos de productos antes de mutar el catalogo.
"""
import re
from dataclasses import replace
from typing import Any

import numpy as np

from inventario.data.models import Product, ProductDraft
from inventario.utils.constants import CATEGORY_DEFAULT
from inventario.utils.exceptions import DataValidationError, FileValidationError


# ============================================================================
# Validadores de Tipos Basicos
# ============================================================================

def validate_not_empty(value: Any, field_name: str) -> Any:
    """
    Valida que el valor no este vacio.

    Args:
        value: Valor a validar
        field_name: Nombre del campo

    Returns:
        El valor si es valido

    Raises:
        DataValidationError: Si el valor es None o vacio
    """
    if value is None:
        raise DataValidationError(f"{field_name} no puede ser None", field=field_name, value=value)

    if isinstance(value, str) and not value.strip():
        raise DataValidationError(f"{field_name} no puede estar vacio", field=field_name, value=value)

    if isinstance(value, (list, dict, tuple)) and len(value) == 0:
        raise DataValidationError(f"{field_name} no puede estar vacio", field=field_name)

    return value


def validate_numeric(
    value: Any,
    field_name: str,
    min_value: float = None,
    max_value: float = None
) -> float:
    """
    Valida y convierte un valor a numerico.

    Args:
        value: Valor a validar
        field_name: Nombre del campo
        min_value: Valor minimo permitido (opcional)
        max_value: Valor maximo permitido (opcional)

    Returns:
        Valor como float

    Raises:
        DataValidationError: Si la validacion falla
    """
    if isinstance(value, bool):
        raise DataValidationError(f"{field_name} debe ser numerico", field=field_name, value=value)

    try:
        num = float(value)
    except (TypeError, ValueError):
        raise DataValidationError(
            f"{field_name} debe ser numerico",
            field=field_name,
            value=value
        )

    if np.isnan(num) or np.isinf(num):
        raise DataValidationError(
            f"{field_name} debe ser un numero finito",
            field=field_name,
            value=value
        )

    if min_value is not None and num < min_value:
        raise DataValidationError(
            f"{field_name} debe ser >= {min_value}",
            field=field_name,
            value=value
        )

    if max_value is not None and num > max_value:
        raise DataValidationError(
            f"{field_name} debe ser <= {max_value}",
            field=field_name,
            value=value
        )

    return num


def validate_positive(value: Any, field_name: str, allow_zero: bool = True) -> float:
    """
    Valida que el valor sea positivo.

    Args:
        value: Valor a validar
        field_name: Nombre del campo
        allow_zero: Permitir cero (default: True)

    Returns:
        Valor como float positivo
    """
    num = validate_numeric(value, field_name, min_value=0)
    if not allow_zero and num == 0:
        raise DataValidationError(f"{field_name} debe ser > 0", field=field_name, value=value)
    return num


def validate_integer(value: Any, field_name: str, min_value: int = None, max_value: int = None) -> int:
    """
    Valida y convierte un valor a entero.

    Raises:
        DataValidationError: Si el valor tiene parte decimal
    """
    num = validate_numeric(value, field_name, min_value=min_value, max_value=max_value)
    if not num.is_integer():
        raise DataValidationError(f"{field_name} debe ser entero", field=field_name, value=value)
    return int(num)


# ============================================================================
# Validadores de Strings
# ============================================================================

def sanitize_string(
    value: Any,
    max_length: int = 255,
    strip: bool = True,
    remove_control_chars: bool = True
) -> str:
    """
    Sanitiza una cadena de texto.

    Args:
        value: Valor a sanitizar
        max_length: Longitud maxima permitida
        strip: Eliminar espacios al inicio/fin
        remove_control_chars: Eliminar caracteres de control

    Returns:
        String sanitizado
    """
    if value is None:
        return ""

    result = str(value)

    if strip:
        result = result.strip()

    if remove_control_chars:
        # Eliminar caracteres de control ASCII (0x00-0x1F y 0x7F-0x9F)
        result = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', result)

    if len(result) > max_length:
        result = result[:max_length]

    return result


def validate_search_term(term: Any, max_length: int = 100) -> str:
    """
    Normaliza el termino de busqueda.

    None o solo espacios -> "". En otro caso el termino se busca tal cual
    (sin recortar espacios), solo sin caracteres de control.
    """
    termino = sanitize_string(term, max_length=max_length, strip=False)
    if not termino.strip():
        return ""
    return termino


# ============================================================================
# Validadores de Productos
# ============================================================================

def validate_product_draft(draft: ProductDraft) -> ProductDraft:
    """
    Valida los datos de alta de un producto.

    Rechaza nombre vacio, precio no positivo y stock negativo.

    Returns:
        Borrador normalizado (strings sanitizados, tipos numericos)

    Raises:
        DataValidationError: Si algun campo es invalido
    """
    name = sanitize_string(draft.name)
    validate_not_empty(name, "name")
    price = validate_positive(draft.price, "price", allow_zero=False)
    stock = validate_integer(draft.stock if draft.stock is not None else 0, "stock", min_value=0)

    return ProductDraft(
        name=name,
        price=price,
        stock=stock,
        category=sanitize_string(draft.category, max_length=50) or CATEGORY_DEFAULT,
        image_url=sanitize_string(draft.image_url, max_length=500),
        description=sanitize_string(draft.description, max_length=1000),
    )


def validate_product(product: Product) -> Product:
    """
    Valida un producto completo antes de que entre al catalogo.

    id entero >= 1, nombre no vacio, precio >= 0, stock entero >= 0 y
    ventas enteras >= 0.

    Returns:
        Producto normalizado

    Raises:
        DataValidationError: Si algun campo es invalido
    """
    pid = validate_integer(product.id, "id", min_value=1)
    name = sanitize_string(product.name)
    validate_not_empty(name, "name")
    price = validate_positive(product.price, "price")
    stock = validate_integer(product.stock, "stock", min_value=0)
    ventas = tuple(validate_integer(v, "sales_data", min_value=0) for v in product.sales_data)

    return Product(
        id=pid,
        name=name,
        price=price,
        stock=stock,
        category=sanitize_string(product.category, max_length=50) or CATEGORY_DEFAULT,
        sales_data=ventas,
        last_updated=product.last_updated,
        image_url=sanitize_string(product.image_url, max_length=500),
        description=sanitize_string(product.description, max_length=1000),
    )


def validate_product_update(product: Product, current: Product) -> Product:
    """
    Valida la edicion de un producto existente.

    La ventana de ventas no puede cambiar de largo.

    Args:
        product: Version editada
        current: Version vigente en el catalogo

    Returns:
        Producto normalizado (con el id vigente)

    Raises:
        DataValidationError: Si algun campo es invalido
    """
    if len(product.sales_data) != len(current.sales_data):
        raise DataValidationError(
            f"sales_data debe tener {len(current.sales_data)} periodos",
            field="sales_data",
            value=len(product.sales_data)
        )
    return validate_product(replace(product, id=current.id))


# ============================================================================
# Validadores de Archivos
# ============================================================================

def validate_file_extension(filename: str, allowed: set = None) -> str:
    """
    Valida la extension de un archivo.

    Args:
        filename: Nombre del archivo
        allowed: Set de extensiones permitidas (default: csv, xlsx)

    Returns:
        Extension en minusculas (sin punto)

    Raises:
        FileValidationError: Si la extension no es valida
    """
    if allowed is None:
        allowed = {'csv', 'xlsx'}

    if not filename or '.' not in filename:
        raise FileValidationError("Archivo sin extension", filename=filename)

    ext = filename.rsplit('.', 1)[1].lower()
    if ext not in allowed:
        raise FileValidationError(
            f"Extension '.{ext}' no permitida",
            filename=filename,
            expected_format=", ".join(sorted(allowed))
        )
    return ext
