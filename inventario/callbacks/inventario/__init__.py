"""
Callbacks Modulares del Panel de Inventario
===========================================

Estructura dividida para mejor mantenimiento:
- catalogo.py: Tabla, KPIs y badge de conexion (refresco por version del store)
- formulario.py: Alta, edicion y baja de productos
- tendencias.py: Tarjetas y graficos de tendencia
- conexion.py: Reconexion del feed en tiempo real
- importacion.py: Importacion de catalogo CSV / Excel
"""

from .catalogo import refrescar_panel, construir_filas, calcular_kpis
from .formulario import abrir_formulario, guardar_producto, eliminar_producto
from .tendencias import renderizar_tendencias, series_del_snapshot
from .conexion import reconectar_feed
from .importacion import importar_catalogo

__all__ = [
    'refrescar_panel',
    'construir_filas',
    'calcular_kpis',
    'abrir_formulario',
    'guardar_producto',
    'eliminar_producto',
    'renderizar_tendencias',
    'series_del_snapshot',
    'reconectar_feed',
    'importar_catalogo'
]
