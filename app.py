"""
Inventario - Panel de Inventario con Tendencias en Tiempo Real
==============================================================
Aplicacion Dash: catalogo de productos, predicciones de tendencia
y feed simulado de actualizaciones
"""
import atexit
import sys
from dash import Dash, html
import dash_bootstrap_components as dbc
from loguru import logger

from inventario.services.runtime import init_runtime, shutdown_runtime
from inventario.utils.config import AppConfig

# Configuracion de logging
logger.remove()
logger.add(
    sys.stdout,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
    level="INFO",
    colorize=True
)

config = AppConfig.from_env()

# Store y feed compartidos por los callbacks
init_runtime(config)
atexit.register(shutdown_runtime)

# Inicializar la aplicacion Dash
app = Dash(
    __name__,
    external_stylesheets=[
        dbc.themes.BOOTSTRAP,
        "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"
    ],
    suppress_callback_exceptions=True,
    title="Inventario",
    update_title=None
)

server = app.server

# Importar pagina
from inventario.pages import inventario as pagina_inventario

# Importar callbacks
from inventario.callbacks import inventario as inventario_callbacks  # noqa: F401

CONTENT_STYLE = {
    "padding": "2rem",
    "minHeight": "100vh",
    "backgroundColor": "#F7F7F7",
}


def create_layout():
    """Crea el layout principal de la aplicacion"""
    return html.Div([
        pagina_inventario.layout
    ], style=CONTENT_STYLE)


# Asignar layout
app.layout = create_layout


if __name__ == "__main__":
    logger.info(f"Configuracion: {config.to_dict()}")
    logger.info(f"Iniciando Inventario en puerto {config.port}")
    # use_reloader=False evita doble ejecucion del feed en modo debug
    app.run(debug=config.debug, host="0.0.0.0", port=config.port, use_reloader=False)
