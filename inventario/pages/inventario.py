"""
Panel de Inventario
===================
Catalogo de productos, predicciones de tendencia y feed en tiempo real
"""
import dash_bootstrap_components as dbc
from dash import html, dcc
import dash_ag_grid as dag

from inventario.components.icons import lucide_icon
from inventario.layouts.components import kpi_card, connection_badge
from inventario.utils.constants import (
    CATEGORY_ALL,
    CATEGORY_DEFAULT,
    INTERVALO_REFRESCO_UI_MS,
    obtener_opciones_categorias,
)
from inventario.utils.grid_helpers import cols_inventario, default_col_def, grid_options


def crear_encabezado() -> html.Div:
    """Titulo, estado de conexion y boton de reconexion"""
    return html.Div([
        html.Div([
            html.H4([
                lucide_icon("boxes", size="lg", className="me-2"),
                "Inventario y Tendencias"
            ], className="mb-0 d-flex align-items-center"),
            html.Small(id="ultima-actualizacion", className="text-muted"),
        ]),
        html.Div([
            html.Span(connection_badge(False), id="badge-conexion", className="me-2"),
            dbc.Button([
                lucide_icon("refresh-cw", size="sm", className="me-1"),
                "Reconectar"
            ], id="btn-reconectar", color="secondary", outline=True, size="sm",
               className="d-inline-flex align-items-center"),
        ], className="d-flex align-items-center"),
    ], className="d-flex justify-content-between align-items-center mb-4")


def crear_barra_filtros() -> dbc.Row:
    """Busqueda, categoria y acciones sobre el catalogo"""
    return dbc.Row([
        dbc.Col([
            dbc.InputGroup([
                dbc.InputGroupText(lucide_icon("search", size="sm")),
                dbc.Input(id="input-busqueda", type="text", placeholder="Buscar producto...",
                          debounce=True, value=""),
            ])
        ], md=4),
        dbc.Col([
            dcc.Dropdown(
                id="dropdown-categoria",
                options=obtener_opciones_categorias(incluir_todas=True),
                value=CATEGORY_ALL,
                clearable=False,
                className="dash-dropdown"
            )
        ], md=3),
        dbc.Col([
            dbc.Button([lucide_icon("plus", size="sm", className="me-1"), "Agregar"],
                       id="btn-agregar-producto", color="primary", size="sm", className="me-2"),
            dbc.Button([lucide_icon("edit", size="sm", className="me-1"), "Editar"],
                       id="btn-editar-producto", color="secondary", outline=True, size="sm", className="me-2"),
            dbc.Button([lucide_icon("trash-2", size="sm", className="me-1"), "Eliminar"],
                       id="btn-eliminar-producto", color="danger", outline=True, size="sm", className="me-2"),
            dcc.Upload(
                id="upload-catalogo",
                children=dbc.Button([lucide_icon("upload", size="sm", className="me-1"), "Importar"],
                                    color="secondary", outline=True, size="sm"),
                accept=".csv,.xlsx,.xls",
                style={"display": "inline-block"}
            ),
        ], md=5, className="d-flex align-items-center justify-content-end"),
    ], className="g-2 mb-3 filters-section")


def crear_kpis() -> dbc.Row:
    """KPIs del catalogo visible"""
    return dbc.Row([
        dbc.Col([
            kpi_card(titulo="Productos", valor="--", subtitulo="En la vista actual",
                     icono="package-open", color="primary", valor_id="kpi-total-productos")
        ], md=3),
        dbc.Col([
            kpi_card(titulo="Unidades en Stock", valor="--", subtitulo="Suma de stock",
                     icono="boxes", color="info", valor_id="kpi-unidades-stock")
        ], md=3),
        dbc.Col([
            kpi_card(titulo="Valor de Inventario", valor="--", subtitulo="Precio x stock",
                     icono="dollar-sign", color="success", valor_id="kpi-valor-inventario")
        ], md=3),
        dbc.Col([
            kpi_card(titulo="En Alza", valor="--", subtitulo="Productos con ventas crecientes",
                     icono="trending-up", color="purple", valor_id="kpi-en-alza",
                     tooltip="Promedio de los ultimos 3 periodos > 1.2x el de los 3 anteriores",
                     tooltip_id="tooltip-kpi-en-alza")
        ], md=3),
    ], className="g-3 mb-4")


def crear_tabla_productos() -> html.Div:
    """Tabla del catalogo filtrado"""
    return html.Div([
        dag.AgGrid(
            id="tabla-productos",
            columnDefs=cols_inventario(),
            rowData=[],
            defaultColDef=default_col_def(filter=True),
            dashGridOptions=grid_options(page_size=10, row_selection="single", animate_rows=True),
            getRowId="params.data.id",
            className="ag-theme-ios-glass",
            style={"height": "420px", "width": "100%"}
        ),
    ], className="table-container mb-4")


def crear_modal_producto() -> dbc.Modal:
    """Formulario de alta / edicion de producto"""
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle(id="titulo-modal-producto"), close_button=True),
        dbc.ModalBody([
            html.Div(id="alerta-formulario"),
            dbc.Label("Nombre"),
            dbc.Input(id="input-nombre", type="text", className="mb-2"),
            dbc.Label("Descripción"),
            dbc.Textarea(id="input-descripcion", className="mb-2"),
            dbc.Row([
                dbc.Col([
                    dbc.Label("Precio"),
                    dbc.Input(id="input-precio", type="number", min=0, step=0.01),
                ], md=6),
                dbc.Col([
                    dbc.Label("Stock"),
                    dbc.Input(id="input-stock", type="number", min=0, step=1),
                ], md=6),
            ], className="mb-2"),
            dbc.Label("Categoría"),
            dcc.Dropdown(
                id="dropdown-categoria-form",
                options=obtener_opciones_categorias(incluir_todas=False),
                value=CATEGORY_DEFAULT,
                clearable=False,
                className="mb-2"
            ),
            dbc.Label("URL de imagen"),
            dbc.Input(id="input-imagen", type="text", placeholder="https://..."),
        ]),
        dbc.ModalFooter([
            dbc.Button("Cancelar", id="btn-cancelar-producto", color="secondary", outline=True),
            dbc.Button("Guardar", id="btn-guardar-producto", color="primary"),
        ]),
    ], id="modal-producto", is_open=False)


def crear_seccion_tendencias() -> html.Div:
    """Toggle y contenedor de tarjetas de tendencia"""
    return html.Div([
        html.Div([
            html.H5([lucide_icon("line-chart", size="md", className="me-2"), "Tendencias"],
                    className="mb-0 d-flex align-items-center"),
            dbc.Switch(id="switch-tendencias", label="Mostrar tendencias", value=True),
        ], className="d-flex justify-content-between align-items-center mb-3"),
        html.Div(id="contenedor-tendencias"),
    ])


layout = html.Div([
    # Refresco periodico: el panel se re-renderiza solo si cambio la version del store
    dcc.Interval(id="interval-refresco", interval=INTERVALO_REFRESCO_UI_MS, n_intervals=0),
    dcc.Store(id="store-version", data=-1),
    # Id del producto en edicion (None = alta)
    dcc.Store(id="store-producto-editando", data=None),

    crear_encabezado(),
    html.Div(id="status-panel"),
    crear_barra_filtros(),
    crear_kpis(),
    crear_tabla_productos(),
    crear_seccion_tendencias(),
    crear_modal_producto(),
], className="fade-in")
