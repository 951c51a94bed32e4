"""
Componentes reutilizables del panel de Inventario
Glassmorphism iOS Design System
"""
import dash_bootstrap_components as dbc
from dash import html
from typing import Optional, Union

from inventario.components.icons import lucide_icon
from inventario.utils.theme import COLORS


def kpi_card(
    titulo: str,
    valor: str,
    subtitulo: str = "",
    icono: str = "box",
    color: str = "primary",
    tooltip: Optional[str] = None,
    tooltip_id: Optional[str] = None,
    valor_id: Optional[str] = None
) -> Union[dbc.Card, html.Div]:
    """
    Tarjeta KPI con estilo Glassmorphism iOS

    Args:
        titulo: Titulo del KPI
        valor: Valor principal a mostrar
        subtitulo: Texto secundario
        icono: Nombre Lucide del icono
        color: Color del tema (primary, success, warning, danger, info, purple)
        tooltip: Texto del tooltip informativo (opcional)
        tooltip_id: ID unico para el tooltip (requerido si tooltip se proporciona)
        valor_id: ID para el elemento del valor (util para actualizaciones dinamicas)
    """
    accent_color = COLORS.get(color, COLORS["primary"])

    estilo_titulo = {
        "fontSize": "0.7rem",
        "letterSpacing": "0.5px",
        "fontWeight": "600",
        "color": COLORS["text_secondary"]
    }
    titulo_content = html.H6(titulo, className="mb-2 text-uppercase", style=estilo_titulo)

    if tooltip and tooltip_id:
        titulo_content = html.Div([
            html.H6(titulo, className="mb-2 text-uppercase d-inline", style=estilo_titulo),
            lucide_icon("info", size="xs", className="ms-2",
                        style={"color": COLORS["text_muted"], "cursor": "pointer"}, id=tooltip_id)
        ])

    valor_props = {
        "className": "mb-1",
        "style": {
            "fontWeight": "700",
            "color": accent_color,
            "fontSize": "1.75rem",
            "lineHeight": "1.2"
        }
    }
    if valor_id:
        valor_props["id"] = valor_id

    card = dbc.Card([
        dbc.CardBody([
            dbc.Row([
                dbc.Col([
                    titulo_content,
                    html.H2(valor, **valor_props),
                    html.Small(subtitulo, style={"color": COLORS["text_secondary"]}) if subtitulo else None,
                ], width=9),
                dbc.Col([
                    html.Div([
                        lucide_icon(icono, size="2x", color=accent_color, style={"opacity": "0.25"})
                    ], className="text-end")
                ], width=3, className="d-flex align-items-center justify-content-end")
            ])
        ], style={"padding": "20px"})
    ], className=f"h-100 kpi-card glass-card-enhanced kpi-{color}",
       style={"borderRadius": "20px"})

    if tooltip and tooltip_id:
        return html.Div([
            card,
            dbc.Tooltip(tooltip, target=tooltip_id, placement="bottom")
        ])

    return card


def empty_state(
    mensaje: str = "No hay productos para mostrar",
    icono: str = "inbox",
    subtitulo: str = "Agrega un producto o importa un catálogo para comenzar",
    variant: str = "default",
    size: str = "medium"
) -> html.Div:
    """
    Estado vacio con estilo glassmorphism iOS

    Args:
        mensaje: Mensaje principal
        icono: Nombre Lucide del icono
        subtitulo: Texto secundario descriptivo
        variant: Tipo de empty state ('default', 'search', 'trends')
        size: Tamano del empty state ('small', 'medium')
    """
    variant_configs = {
        "search": {
            "icono": "search",
            "mensaje": "No se encontraron productos",
            "subtitulo": "Intenta con otro término de búsqueda o categoría"
        },
        "trends": {
            "icono": "line-chart",
            "mensaje": "No hay predicciones para mostrar",
            "subtitulo": "Las tendencias aparecen cuando hay productos en la vista"
        },
    }

    if variant in variant_configs:
        config = variant_configs[variant]
        mensaje, icono, subtitulo = config["mensaje"], config["icono"], config["subtitulo"]

    size_configs = {
        "small": {"icon_size": "2x", "padding": "py-3", "title_class": "h6"},
        "medium": {"icon_size": "3x", "padding": "py-5", "title_class": "h5"},
    }
    size_config = size_configs.get(size, size_configs["medium"])

    return html.Div([
        lucide_icon(
            icono,
            size=size_config["icon_size"],
            className="mb-3",
            style={"color": COLORS["text_muted"], "opacity": "0.6"}
        ),
        html.Div(
            mensaje,
            className=f"{size_config['title_class']} mb-2",
            style={"fontWeight": "600", "color": COLORS["text_secondary"]}
        ),
        html.P(
            subtitulo,
            style={"maxWidth": "400px", "margin": "0 auto", "color": COLORS["text_muted"], "fontSize": "0.9rem"}
        )
    ], className=f"text-center {size_config['padding']}",
       style={
           "borderRadius": "16px",
           "backgroundColor": "rgba(255, 255, 255, 0.5)",
           "border": "2px dashed rgba(199, 199, 204, 0.5)"
       })


def alert_message(mensaje: str, tipo: str = "info") -> dbc.Alert:
    """
    Mensaje de alerta con estilo iOS

    Args:
        mensaje: Texto del mensaje
        tipo: Tipo de alerta (success, warning, danger, info)
    """
    iconos = {
        "success": "check-circle",
        "warning": "alert-triangle",
        "danger": "x-circle",
        "info": "info"
    }

    return dbc.Alert([
        lucide_icon(iconos.get(tipo, 'info'), size="md", className="me-2"),
        mensaje
    ], color=tipo, dismissable=True, duration=6000,
       style={
           "borderRadius": "12px",
           "border": "none",
           "borderLeft": f"4px solid {COLORS.get(tipo, COLORS['primary'])}",
           "backgroundColor": "rgba(255,255,255,0.95)",
           "boxShadow": "0 8px 32px rgba(31,31,33,0.15)"
       })


def connection_badge(conectado: bool) -> dbc.Badge:
    """Badge del estado del feed en tiempo real"""
    if conectado:
        return dbc.Badge([
            lucide_icon("check-circle", size="xs", className="me-1", color="#FFFFFF"),
            "Conectado"
        ], color="success", pill=True, className="d-inline-flex align-items-center")
    return dbc.Badge([
        lucide_icon("x-circle", size="xs", className="me-1", color="#FFFFFF"),
        "Desconectado"
    ], color="danger", pill=True, className="d-inline-flex align-items-center")
