"""
Helpers para graficos Plotly
============================
Funciones utilitarias para crear graficos consistentes.
"""
from typing import Optional

import plotly.graph_objects as go

from inventario.data.models import TrendSeries
from inventario.utils.theme import PLOTLY_TEMPLATE, COLORS, color_con_alpha


def crear_figura_vacia(mensaje: str = "Sin datos", color_texto: str = None) -> go.Figure:
    """
    Crea una figura Plotly vacia con un mensaje centrado.

    Args:
        mensaje: Texto a mostrar en el centro del grafico
        color_texto: Color del texto (default: text_secondary del theme)

    Returns:
        go.Figure con el mensaje centrado
    """
    if color_texto is None:
        color_texto = COLORS.get('text_secondary', '#8e8e93')

    # Filtrar margin del template para evitar duplicado
    layout_base = {k: v for k, v in PLOTLY_TEMPLATE["layout"].items() if k != "margin"}

    fig = go.Figure()
    fig.update_layout(
        **layout_base,
        annotations=[{
            "text": mensaje,
            "showarrow": False,
            "font": {"size": 12, "color": color_texto},
            "xref": "paper",
            "yref": "paper",
            "x": 0.5,
            "y": 0.5
        }],
        margin=dict(l=20, r=20, t=20, b=20)
    )
    return fig


def crear_figura_tendencia(serie: Optional[TrendSeries], titulo: str = "") -> go.Figure:
    """
    Grafico de ventas reales y predichas (linea punteada) de un producto.

    Las series se alinean sobre el mismo eje: la prediccion arranca en el
    periodo siguiente al ultimo real.

    Args:
        serie: Serie del producto (None si ya no existe)
        titulo: Titulo del grafico

    Returns:
        go.Figure
    """
    if serie is None:
        return crear_figura_vacia("Producto no disponible")

    etiquetas = serie.labels()
    reales, predichas = serie.aligned()

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=etiquetas,
        y=reales,
        name="Ventas reales",
        mode="lines+markers",
        line=dict(color=COLORS["teal"], width=2),
        fill="tozeroy",
        fillcolor=color_con_alpha("teal", 0.15),
        connectgaps=False
    ))
    fig.add_trace(go.Scatter(
        x=etiquetas,
        y=predichas,
        name="Predicción",
        mode="lines+markers",
        line=dict(color=COLORS["pink"], width=2, dash="dash"),
        connectgaps=False
    ))

    layout_base = {k: v for k, v in PLOTLY_TEMPLATE["layout"].items() if k != "margin"}
    fig.update_layout(
        **layout_base,
        title={"text": titulo, "font": {"size": 13}},
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1,
                    bgcolor="rgba(0,0,0,0)", font={"size": 10}),
        margin=dict(l=36, r=12, t=40, b=30),
        hovermode="x unified",
        height=240
    )
    return fig
