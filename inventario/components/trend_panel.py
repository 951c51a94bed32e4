"""
Panel de Tendencias

Tarjetas de prediccion por producto: tendencia, confianza, proximas ventas
y grafico real vs predicho.
"""
from typing import Dict, Iterable, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from inventario.components.icons import trend_icon
from inventario.data.models import TrendPrediction, TrendSeries
from inventario.layouts.components import empty_state
from inventario.utils.formatters import formato_confianza
from inventario.utils.plotly_helpers import crear_figura_tendencia
from inventario.utils.theme import TREND_BADGE_COLORS

ETIQUETAS_TENDENCIA = {
    "rising": "En alza",
    "falling": "En baja",
    "stable": "Estable",
}


def crear_tarjeta_tendencia(
    prediccion: TrendPrediction,
    serie: Optional[TrendSeries] = None
) -> dbc.Card:
    """
    Tarjeta de tendencia de un producto.

    Args:
        prediccion: Prediccion vigente del producto
        serie: Serie real + predicha para el grafico (None omite el grafico)
    """
    tendencia = prediccion.current_trend.value

    cuerpo = [
        html.Div([
            html.H6(prediccion.product_name, className="mb-0 fw-semibold"),
            dbc.Badge([
                trend_icon(tendencia, size="xs"),
                html.Span(ETIQUETAS_TENDENCIA.get(tendencia, tendencia), className="ms-1")
            ], color=TREND_BADGE_COLORS.get(tendencia, "secondary"), pill=True,
               className="d-inline-flex align-items-center"),
        ], className="d-flex justify-content-between align-items-center mb-2"),
        html.Div([
            html.Small("Confianza: ", className="text-muted"),
            html.Strong(formato_confianza(prediccion.confidence)),
        ]),
        dbc.Progress(value=round(prediccion.confidence * 100), className="mb-2",
                     style={"height": "4px"}),
        html.Div([
            html.Small("Próximos períodos: ", className="text-muted"),
            html.Strong(", ".join(str(v) for v in prediccion.predicted_sales)),
        ], className="mb-2"),
    ]

    if serie is not None:
        cuerpo.append(dcc.Graph(
            figure=crear_figura_tendencia(serie),
            config={"displayModeBar": False},
            id={"type": "grafico-tendencia", "index": prediccion.product_id},
        ))

    return dbc.Card(
        dbc.CardBody(cuerpo),
        className="h-100 glass-card-enhanced",
        style={"borderRadius": "16px"}
    )


def crear_panel_tendencias(
    predicciones: Iterable[TrendPrediction],
    series: Dict[int, TrendSeries] = None
) -> html.Div:
    """
    Grilla de tarjetas de tendencia.

    Args:
        predicciones: Predicciones a mostrar (vista filtrada)
        series: Series por product_id para los graficos
    """
    series = series or {}
    predicciones = list(predicciones)
    if not predicciones:
        return empty_state(variant="trends", size="small")

    return dbc.Row([
        dbc.Col(
            crear_tarjeta_tendencia(p, series.get(p.product_id)),
            xs=12, md=6, xl=4, className="mb-3"
        )
        for p in predicciones
    ])
