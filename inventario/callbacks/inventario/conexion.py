"""
Callbacks del feed en tiempo real.
"""
from dash import callback, Output, Input, no_update

from inventario.layouts.components import alert_message
from inventario.services.runtime import get_feed
from inventario.utils.logger import get_logger

logger = get_logger(__name__)


@callback(
    Output("status-panel", "children", allow_duplicate=True),
    Input("btn-reconectar", "n_clicks"),
    prevent_initial_call=True
)
def reconectar_feed(n_clicks):
    """Reintenta la conexion del feed; el badge se actualiza en el proximo refresco"""
    if not n_clicks:
        return no_update

    feed = get_feed()
    if feed.is_running:
        return alert_message("El feed ya está conectado", "info")

    if feed.connect():
        logger.info("Feed reconectado por el operador")
        return alert_message("Feed en tiempo real conectado", "success")

    return alert_message("No se pudo conectar el feed en tiempo real", "danger")
