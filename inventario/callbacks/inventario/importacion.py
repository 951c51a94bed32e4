"""
Callback de importacion de catalogo (CSV / Excel).
"""
from dash import callback, Output, Input, State, no_update, html

from inventario.data.catalog_loader import cargar_catalogo_desde_upload
from inventario.layouts.components import alert_message
from inventario.services.runtime import get_store
from inventario.utils.exceptions import DataValidationError
from inventario.utils.logger import get_logger

logger = get_logger(__name__)

# Errores a listar en la alerta
MAX_ERRORES_VISIBLES = 5


@callback(
    Output("status-panel", "children", allow_duplicate=True),
    Input("upload-catalogo", "contents"),
    State("upload-catalogo", "filename"),
    prevent_initial_call=True
)
def importar_catalogo(contents, filename):
    """Reemplaza el catalogo con el archivo subido si no tiene errores"""
    if contents is None:
        return no_update

    resultado = cargar_catalogo_desde_upload(contents, filename)

    if not resultado['success']:
        errores = resultado['errores']
        detalle = html.Ul([html.Li(e) for e in errores[:MAX_ERRORES_VISIBLES]], className="mb-0 small")
        extra = len(errores) - MAX_ERRORES_VISIBLES
        return alert_message(
            html.Div([
                html.Strong(f"No se importó {filename}"),
                detalle,
                html.Small(f"... y {extra} errores más") if extra > 0 else None,
            ]),
            "danger"
        )

    try:
        snap = get_store().load_catalog(resultado['productos'])
    except DataValidationError as e:
        logger.warning(f"Catalogo rechazado por el store: {e}")
        return alert_message(e.message, "danger")

    return alert_message(f"Catálogo importado: {len(snap.catalog)} productos", "success")
