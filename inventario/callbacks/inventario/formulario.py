"""
Callbacks del formulario de productos: alta, edicion y baja.
"""
from dataclasses import replace

from dash import callback, Output, Input, State, no_update, ctx

from inventario.data.models import ProductDraft
from inventario.layouts.components import alert_message
from inventario.services.runtime import get_store
from inventario.utils.constants import CATEGORY_DEFAULT
from inventario.utils.exceptions import DataValidationError, ProductNotFoundError
from inventario.utils.logger import get_logger

logger = get_logger(__name__)


def _id_seleccionado(filas_seleccionadas):
    """Id del producto seleccionado en la tabla (o None)"""
    if not filas_seleccionadas:
        return None
    return filas_seleccionadas[0].get("id")


@callback(
    Output("modal-producto", "is_open"),
    Output("titulo-modal-producto", "children"),
    Output("input-nombre", "value"),
    Output("input-descripcion", "value"),
    Output("input-precio", "value"),
    Output("input-stock", "value"),
    Output("dropdown-categoria-form", "value"),
    Output("input-imagen", "value"),
    Output("store-producto-editando", "data"),
    Output("alerta-formulario", "children"),
    Output("status-panel", "children", allow_duplicate=True),
    Input("btn-agregar-producto", "n_clicks"),
    Input("btn-editar-producto", "n_clicks"),
    Input("btn-cancelar-producto", "n_clicks"),
    State("tabla-productos", "selectedRows"),
    prevent_initial_call=True
)
def abrir_formulario(n_agregar, n_editar, n_cancelar, filas_seleccionadas):
    """Abre el modal vacio (alta) o precargado (edicion); cancelar lo cierra"""
    sin_cambios = (no_update,) * 11

    if ctx.triggered_id == "btn-cancelar-producto":
        return (False,) + (no_update,) * 7 + (None, None, no_update)

    if ctx.triggered_id == "btn-agregar-producto":
        return (True, "Nuevo producto", "", "", None, 0, CATEGORY_DEFAULT, "", None, None, no_update)

    if ctx.triggered_id == "btn-editar-producto":
        producto_id = _id_seleccionado(filas_seleccionadas)
        if producto_id is None:
            return sin_cambios[:10] + (alert_message("Selecciona un producto para editar", "warning"),)

        producto = get_store().get_product(producto_id)
        if producto is None:
            return sin_cambios[:10] + (alert_message("El producto ya no existe", "warning"),)

        return (
            True, f"Editar: {producto.name}",
            producto.name, producto.description, producto.price, producto.stock,
            producto.category, producto.image_url,
            producto.id, None, no_update
        )

    return sin_cambios


@callback(
    Output("modal-producto", "is_open", allow_duplicate=True),
    Output("alerta-formulario", "children", allow_duplicate=True),
    Output("status-panel", "children", allow_duplicate=True),
    Input("btn-guardar-producto", "n_clicks"),
    State("store-producto-editando", "data"),
    State("input-nombre", "value"),
    State("input-descripcion", "value"),
    State("input-precio", "value"),
    State("input-stock", "value"),
    State("dropdown-categoria-form", "value"),
    State("input-imagen", "value"),
    prevent_initial_call=True
)
def guardar_producto(n_clicks, producto_id, nombre, descripcion, precio, stock, categoria, imagen):
    """Confirma el alta o la edicion; los errores de validacion quedan en el modal"""
    if not n_clicks:
        return no_update, no_update, no_update

    store = get_store()
    try:
        if producto_id is None:
            producto = store.add_product(ProductDraft(
                name=nombre or "",
                price=precio,
                stock=stock if stock is not None else 0,
                category=categoria or CATEGORY_DEFAULT,
                image_url=imagen or "",
                description=descripcion or "",
            ))
            mensaje = f"Producto '{producto.name}' agregado"
        else:
            actual = store.get_product(producto_id)
            if actual is None:
                raise ProductNotFoundError(producto_id)
            producto = store.update_product(replace(
                actual,
                name=nombre or "",
                price=precio,
                stock=stock,
                category=categoria or CATEGORY_DEFAULT,
                image_url=imagen or "",
                description=descripcion or "",
            ))
            mensaje = f"Producto '{producto.name}' actualizado"
    except DataValidationError as e:
        logger.warning(f"Formulario de producto invalido: {e}")
        return no_update, alert_message(e.message, "danger"), no_update
    except ProductNotFoundError as e:
        logger.warning(str(e))
        return False, None, alert_message(e.message, "warning")

    return False, None, alert_message(mensaje, "success")


@callback(
    Output("status-panel", "children", allow_duplicate=True),
    Input("btn-eliminar-producto", "n_clicks"),
    State("tabla-productos", "selectedRows"),
    prevent_initial_call=True
)
def eliminar_producto(n_clicks, filas_seleccionadas):
    """Elimina el producto seleccionado junto con su prediccion"""
    if not n_clicks:
        return no_update

    producto_id = _id_seleccionado(filas_seleccionadas)
    if producto_id is None:
        return alert_message("Selecciona un producto para eliminar", "warning")

    try:
        get_store().delete_product(producto_id)
    except ProductNotFoundError as e:
        logger.warning(str(e))
        return alert_message(e.message, "warning")

    return alert_message(f"Producto {producto_id} eliminado", "success")
