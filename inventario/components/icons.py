"""
Icon Component
==============
Iconos Lucide SVG para el panel de inventario
"""
import re
from typing import Any, Dict, Optional

from dash import html

from inventario.utils.theme import TREND_COLORS

# Tamanos predefinidos (px)
ICON_SIZES: Dict[str, int] = {
    "xs": 12,
    "sm": 14,
    "md": 16,
    "lg": 20,
    "xl": 24,
    "2x": 32,
    "3x": 48,
}

# Iconos semanticos del panel
TREND_ICONS: Dict[str, str] = {
    "rising": "trending-up",
    "falling": "arrow-down",
    "stable": "minus",
}

# Propiedades CSS permitidas en style
_ALLOWED_STYLE_PROPS = {
    'margin', 'marginTop', 'marginBottom', 'marginLeft', 'marginRight',
    'opacity', 'cursor', 'verticalAlign', 'display', 'color'
}

# Solo alfanumericos, guiones y espacios
_CLASSNAME_REGEX = re.compile(r'^[a-zA-Z0-9\-_ ]*$')
_COLOR_REGEX = re.compile(r'^(#[0-9a-fA-F]{3,8}|[a-zA-Z]+|currentColor)$')

LUCIDE_SVG = {
    "trending-up": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><polyline points="23 6 13.5 15.5 9.5 11.5 1 20"/><polyline points="17 6 23 6 23 12"/></svg>""",
    "arrow-down": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M6 9l6 6 6-6"/></svg>""",
    "minus": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M5 12h14"/></svg>""",
    "plus": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M12 5v14"/><path d="M5 12h14"/></svg>""",
    "edit": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M11 4H4a2 2 0 0 0-2 2v14a2 2 0 0 0 2 2h14a2 2 0 0 0 2-2v-7"/><path d="M18.5 2.5a2.121 2.121 0 0 1 3 3L12 15l-4 1 1-4 9.5-9.5z"/></svg>""",
    "trash-2": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M3 6h18"/><path d="M19 6v14a2 2 0 0 1-2 2H7a2 2 0 0 1-2-2V6m3 0V4a2 2 0 0 1 2-2h4a2 2 0 0 1 2 2v2"/><path d="M10 11v6"/><path d="M14 11v6"/><line x1="2" y1="6" x2="22" y2="6"/></svg>""",
    "search": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><circle cx="11" cy="11" r="8"/><path d="M21 21l-4.35-4.35"/></svg>""",
    "refresh-cw": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><polyline points="23 4 23 10 17 10"/><polyline points="1 20 1 14 7 14"/><path d="M20.49 9A9 9 0 0 0 5.64 5.64L1 10m22 4l-4.64 4.36A9 9 0 0 1 3.51 15"/></svg>""",
    "check-circle": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M22 11.08V12a10 10 0 1 1-5.93-9.14"/><polyline points="22,4 12,14.01 9,11.01"/></svg>""",
    "x-circle": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><circle cx="12" cy="12" r="10"/><path d="M15 9l-6 6"/><path d="M9 9l6 6"/></svg>""",
    "boxes": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M2.97 12.92A2 2 0 0 0 2 14.63v3.24a2 2 0 0 0 .97 1.71l3 1.8a2 2 0 0 0 2.06 0L12 19.24a2 2 0 0 0 1.03-1.71V14.63a2 2 0 0 0-.97-1.71L8 10.42a2 2 0 0 0-2.06 0l-3 1.8z"/><path d="M7 16.5l-4.74-2.85"/><path d="M7 16.5l4.74-2.85"/><path d="M7 16.5v5.17"/></svg>""",
    "box": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M21 16V8a2 2 0 0 0-1-1.73l-7-4a2 2 0 0 0-2 0l-7 4A2 2 0 0 0 3 8v8a2 2 0 0 0 1 1.73l7 4a2 2 0 0 0 2 0l7-4A2 2 0 0 0 21 16z"/><polyline points="3.27,6.96 12,12.01 20.73,6.96"/><line x1="12" y1="22.08" x2="12" y2="12"/></svg>""",
    "upload": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/><polyline points="7,10 12,15 17,10"/><line x1="12" y1="15" x2="12" y2="3"/></svg>""",
    "info": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><circle cx="12" cy="12" r="10"/><path d="M12 16v-4"/><path d="M12 8h.01"/></svg>""",
    "line-chart": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M3 3v18h18"/><path d="m19 9-5 5-4-4-3 3"/></svg>""",
    "alert-triangle": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="m21.73 18-8-14a2 2 0 0 0-3.48 0l-8 14A2 2 0 0 0 4 21h16a2 2 0 0 0 1.73-3Z"/><path d="M12 9v4"/><path d="M12 17h.01"/></svg>""",
    "inbox": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><polyline points="22,12 16,12 14,15 10,15 8,12 2,12"/><path d="M5.45 5.11L2 12v6a2 2 0 0 0 2 2h16a2 2 0 0 0 2-2v-6l-3.45-6.89A2 2 0 0 0 16.76 4H7.24a2 2 0 0 0-1.79 1.11z"/></svg>""",
    "package-open": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><path d="M20.91 8.84 8.56 2.23a1.93 1.93 0 0 0-1.81 0L3.1 4.13a2.12 2.12 0 0 0-.05 3.69l12.22 6.93a2 2 0 0 0 1.94 0L21 12.51a2.12 2.12 0 0 0-.09-3.67Z"/><path d="M3.09 8.84c0 1.05.52 2.02 1.4 2.6l7.51 4.28a2.12 2.12 0 0 0 2.08 0l7.52-4.28a2.12 2.12 0 0 0 1.4-2.6l-.09-1.36"/><path d="M12 21c-1.05 0-2.02-.52-2.6-1.4L3.1 8.84"/><path d="M12 21c1.05 0 2.02-.52 2.6-1.4l6.3-10.76"/><path d="M12 2v19"/></svg>""",
    "dollar-sign": """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"><line x1="12" y1="1" x2="12" y2="23"/><path d="M17 5H9.5a3.5 3.5 0 0 0 0 7h5a3.5 3.5 0 0 1 0 7H6"/></svg>""",
}


def lucide_icon(
    name: str,
    size="md",
    color: Optional[str] = None,
    className: str = "",
    style: Optional[Dict[str, Any]] = None,
    **kwargs
) -> html.Div:
    """
    Renderiza un icono Lucide SVG como componente Dash.

    Los SVGs son constantes; color, className y style se validan antes de usarse.

    Args:
        name: Nombre Lucide del icono (fallback: info)
        size: Tamano ('xs', 'sm', 'md', 'lg', 'xl' o pixeles)
        color: Color CSS del trazo
        className: Clases CSS adicionales
        style: Estilos inline adicionales (filtrados)

    Returns:
        html.Div con el SVG embebido como data URI
    """
    svg_html = LUCIDE_SVG.get(name) or LUCIDE_SVG["info"]

    if isinstance(size, str):
        size_px = ICON_SIZES.get(size, 16)
    elif isinstance(size, (int, float)) and 8 <= size <= 200:
        size_px = int(size)
    else:
        size_px = 16

    svg_html = svg_html.replace('width="24"', f'width="{size_px}"').replace('height="24"', f'height="{size_px}"')

    safe_color = color if color and _COLOR_REGEX.match(color) else None
    if safe_color:
        svg_html = svg_html.replace('stroke="currentColor"', f'stroke="{safe_color}"')

    classes = ["lucide-icon"]
    if className and _CLASSNAME_REGEX.match(className):
        classes.append(className)

    final_style = {
        'display': 'inline-flex',
        'alignItems': 'center',
        'width': f'{size_px}px',
        'height': f'{size_px}px',
        'flexShrink': '0',
        **{k: v for k, v in (style or {}).items() if k in _ALLOWED_STYLE_PROPS}
    }

    svg_data_uri = f"data:image/svg+xml,{svg_html.replace('#', '%23').replace('<', '%3C').replace('>', '%3E').replace(' ', '%20')}"

    return html.Div(
        html.Img(src=svg_data_uri, style={'width': '100%', 'height': '100%'}, alt=""),
        className=" ".join(classes),
        style=final_style,
        **{k: v for k, v in kwargs.items() if k in ('id', 'title')}
    )


def trend_icon(trend: str, size="sm") -> html.Div:
    """Icono de tendencia (rising / falling / stable) con su color"""
    clave = getattr(trend, "value", trend)
    return lucide_icon(TREND_ICONS.get(clave, "minus"), size=size, color=TREND_COLORS.get(clave))
