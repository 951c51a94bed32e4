"""
Excepciones Personalizadas para Inventario
Define excepciones especificas para mejorar el manejo de errores.
"""


class InventarioError(Exception):
    """
    Excepcion base para la aplicacion Inventario.
    Todas las excepciones personalizadas heredan de esta.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Detalles: {self.details}"
        return self.message


# ============================================================================
# Excepciones de Validacion
# ============================================================================

class ValidationError(InventarioError):
    """Excepcion base para errores de validacion"""
    pass


class DataValidationError(ValidationError):
    """Error al validar datos de entrada"""

    def __init__(self, message: str, field: str = None, value=None):
        details = {}
        if field:
            details['field'] = field
        if value is not None:
            details['value'] = str(value)[:100]  # Truncar
        self.field = field
        super().__init__(message, details)


class FileValidationError(ValidationError):
    """Error al validar un archivo"""

    def __init__(self, message: str, filename: str = None, expected_format: str = None):
        details = {}
        if filename:
            details['filename'] = filename
        if expected_format:
            details['expected_format'] = expected_format
        super().__init__(message, details)


class ConfigurationError(ValidationError):
    """Error en la configuracion del sistema"""
    pass


# ============================================================================
# Excepciones de Catalogo
# ============================================================================

class CatalogError(InventarioError):
    """Excepcion base para errores sobre el catalogo de productos"""
    pass


class ProductNotFoundError(CatalogError):
    """El producto no existe en el catalogo actual"""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Producto {product_id} no encontrado", {'product_id': product_id})


# ============================================================================
# Excepciones de Conexion Externa
# ============================================================================

class ExternalConnectionError(InventarioError):
    """Excepcion base para errores de conexion externa"""
    pass


class FeedConnectionError(ExternalConnectionError):
    """Error al establecer el feed de actualizaciones en tiempo real"""

    def __init__(self, message: str, endpoint: str = None):
        details = {}
        if endpoint:
            details['endpoint'] = endpoint
        super().__init__(message, details)
