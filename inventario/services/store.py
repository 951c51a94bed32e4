"""
Contenedor de Estado del Inventario
===================================

Unico punto de mutacion del catalogo. Cada accion pasa por un reducer puro que,
cuando cambia el catalogo, recalcula en el mismo paso todas las predicciones y
la vista filtrada. El nuevo estado se publica con un unico reemplazo de
referencia, por lo que un lector nunca ve un catalogo junto a predicciones
calculadas sobre un catalogo anterior.

Las escrituras se serializan con un lock: los callbacks de Dash corren en
threads de Flask y el feed en su propio thread.

Ejemplo de uso:
    store = InventoryStore(load_seed_catalog())
    nuevo = store.add_product(ProductDraft(name="Mouse", price=25.0))
    store.set_filters("mouse", "all")
    snap = store.snapshot()
    snap.filtered_predictions  # -> (TrendPrediction(product_id=6, ...),)
"""
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Iterable, Optional, Tuple, Union

from loguru import logger

from inventario.data.models import (
    ConnectionStatus,
    DashboardSnapshot,
    Product,
    ProductDraft,
    TrendSeries,
)
from inventario.ml.tendencias import build_trend_series, forecast_catalog
from inventario.services.filters import build_filtered_view
from inventario.utils.constants import CATEGORY_ALL, VENTANA_VENTAS
from inventario.utils.exceptions import DataValidationError, ProductNotFoundError
from inventario.utils.validators import (
    validate_product,
    validate_product_draft,
    validate_product_update,
    validate_search_term,
)


# ============================================================================
# Acciones
# ============================================================================

@dataclass(frozen=True)
class LoadCatalog:
    """Reemplaza el catalogo completo (carga inicial o importacion)"""
    products: Tuple[Product, ...]


@dataclass(frozen=True)
class AddProduct:
    draft: ProductDraft


@dataclass(frozen=True)
class UpdateProduct:
    product: Product


@dataclass(frozen=True)
class DeleteProduct:
    product_id: int


@dataclass(frozen=True)
class ApplyFeedMutation:
    """
    Reemplaza un producto mutado por el feed en tiempo real.

    Si expected se indica, la mutacion solo se aplica cuando el producto
    vigente sigue siendo igual a expected (concurrencia optimista).
    """
    product: Product
    expected: Optional[Product] = None


@dataclass(frozen=True)
class SetFilters:
    search_term: str = ""
    category: str = CATEGORY_ALL


@dataclass(frozen=True)
class SetConnectionStatus:
    status: ConnectionStatus


Action = Union[
    LoadCatalog, AddProduct, UpdateProduct, DeleteProduct,
    ApplyFeedMutation, SetFilters, SetConnectionStatus
]


# ============================================================================
# Reducer
# ============================================================================

def _commit_catalog(state: DashboardSnapshot, catalog: Tuple[Product, ...]) -> DashboardSnapshot:
    """Nuevo catalogo + predicciones recalculadas + vista filtrada, en un solo paso"""
    predicciones = forecast_catalog(catalog)
    filtrados, predicciones_filtradas = build_filtered_view(
        catalog, predicciones, state.search_term, state.category
    )
    return replace(
        state,
        catalog=catalog,
        predictions=predicciones,
        filtered_catalog=filtrados,
        filtered_predictions=predicciones_filtradas,
        version=state.version + 1,
    )


def _find_index(catalog: Tuple[Product, ...], product_id: int) -> Optional[int]:
    for i, p in enumerate(catalog):
        if p.id == product_id:
            return i
    return None


def _replace_at(catalog: Tuple[Product, ...], index: int, product: Product) -> Tuple[Product, ...]:
    return catalog[:index] + (product,) + catalog[index + 1:]


def reduce(state: DashboardSnapshot, action: Action, now: datetime) -> DashboardSnapshot:
    """
    Aplica una accion al estado.

    Args:
        state: Estado vigente
        action: Accion a aplicar
        now: Instante de la mutacion (para last_updated)

    Returns:
        Nuevo estado, o el mismo objeto si la accion no produce cambios

    Raises:
        DataValidationError: Datos de producto invalidos
        ProductNotFoundError: Edicion o baja de un id inexistente
    """
    if isinstance(action, LoadCatalog):
        catalogo = tuple(validate_product(p) for p in action.products)
        ids = [p.id for p in catalogo]
        if len(ids) != len(set(ids)):
            raise DataValidationError("El catalogo contiene ids duplicados", field="id")
        return _commit_catalog(state, catalogo)

    if isinstance(action, AddProduct):
        draft = validate_product_draft(action.draft)
        nuevo = Product(
            id=max((p.id for p in state.catalog), default=0) + 1,
            name=draft.name,
            price=draft.price,
            stock=draft.stock,
            category=draft.category,
            sales_data=(0,) * VENTANA_VENTAS,
            last_updated=now,
            image_url=draft.image_url,
            description=draft.description,
        )
        return _commit_catalog(state, state.catalog + (nuevo,))

    if isinstance(action, UpdateProduct):
        idx = _find_index(state.catalog, action.product.id)
        if idx is None:
            raise ProductNotFoundError(action.product.id)
        editado = validate_product_update(action.product, state.catalog[idx])
        editado = replace(editado, last_updated=now)
        return _commit_catalog(state, _replace_at(state.catalog, idx, editado))

    if isinstance(action, DeleteProduct):
        idx = _find_index(state.catalog, action.product_id)
        if idx is None:
            raise ProductNotFoundError(action.product_id)
        return _commit_catalog(state, state.catalog[:idx] + state.catalog[idx + 1:])

    if isinstance(action, ApplyFeedMutation):
        idx = _find_index(state.catalog, action.product.id)
        if idx is None:
            # Borrado entre la lectura y el commit: no se resucita
            return state
        if action.expected is not None and state.catalog[idx] != action.expected:
            return state
        if len(action.product.sales_data) != len(state.catalog[idx].sales_data):
            raise DataValidationError(
                "La mutacion cambio el largo de la ventana de ventas",
                field="sales_data",
                value=len(action.product.sales_data)
            )
        mutado = validate_product(action.product)
        return _commit_catalog(state, _replace_at(state.catalog, idx, mutado))

    if isinstance(action, SetFilters):
        termino = validate_search_term(action.search_term)
        categoria = action.category or CATEGORY_ALL
        filtrados, predicciones_filtradas = build_filtered_view(
            state.catalog, state.predictions, termino, categoria
        )
        return replace(
            state,
            search_term=termino,
            category=categoria,
            filtered_catalog=filtrados,
            filtered_predictions=predicciones_filtradas,
            version=state.version + 1,
        )

    if isinstance(action, SetConnectionStatus):
        if action.status is state.connection_status:
            return state
        return replace(state, connection_status=action.status, version=state.version + 1)

    raise TypeError(f"Accion no soportada: {type(action).__name__}")


# ============================================================================
# Store
# ============================================================================

class InventoryStore:
    """
    Store del panel: catalogo, predicciones, filtros y estado de conexion.

    Todas las escrituras pasan por dispatch(); snapshot() devuelve siempre un
    estado completo e inmutable.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        clock: Callable[[], datetime] = None
    ):
        """
        Inicializa el store.

        Args:
            products: Catalogo inicial
            clock: Fuente de tiempo (default: datetime.now)
        """
        self._lock = threading.Lock()
        self._clock = clock or datetime.now
        self._state = DashboardSnapshot()
        productos = tuple(products)
        if productos:
            self.dispatch(LoadCatalog(productos))

    def dispatch(self, action: Action) -> DashboardSnapshot:
        """Aplica una accion y publica el nuevo estado de forma atomica"""
        return self._dispatch(action)[1]

    def _dispatch(self, action: Action) -> Tuple[DashboardSnapshot, DashboardSnapshot]:
        with self._lock:
            anterior = self._state
            nuevo = reduce(anterior, action, self._clock())
            self._state = nuevo
        if nuevo is anterior:
            logger.debug(f"{type(action).__name__} sin cambios")
        else:
            logger.debug(f"{type(action).__name__} aplicada (version {nuevo.version})")
        return anterior, nuevo

    def snapshot(self) -> DashboardSnapshot:
        """Estado vigente (lectura sin lock: la referencia se reemplaza entera)"""
        return self._state

    @property
    def version(self) -> int:
        return self._state.version

    # ------------------------------------------------------------------
    # Operaciones CRUD
    # ------------------------------------------------------------------

    def load_catalog(self, products: Iterable[Product]) -> DashboardSnapshot:
        snap = self.dispatch(LoadCatalog(tuple(products)))
        logger.info(f"Catalogo cargado: {len(snap.catalog)} productos")
        return snap

    def add_product(self, draft: ProductDraft) -> Product:
        """
        Da de alta un producto.

        Returns:
            Producto creado (id asignado, ventana en ceros)

        Raises:
            DataValidationError: Si el borrador es invalido
        """
        snap = self.dispatch(AddProduct(draft))
        producto = snap.catalog[-1]
        logger.info(f"Producto agregado: {producto.id} - {producto.name}")
        return producto

    def update_product(self, product: Product) -> Product:
        """
        Reemplaza un producto existente.

        Raises:
            ProductNotFoundError: Si el id no existe
            DataValidationError: Si los datos son invalidos
        """
        snap = self.dispatch(UpdateProduct(product))
        actualizado = next(p for p in snap.catalog if p.id == product.id)
        logger.info(f"Producto actualizado: {actualizado.id} - {actualizado.name}")
        return actualizado

    def delete_product(self, product_id: int) -> DashboardSnapshot:
        """
        Elimina un producto y su prediccion.

        Raises:
            ProductNotFoundError: Si el id no existe
        """
        snap = self.dispatch(DeleteProduct(product_id))
        logger.info(f"Producto eliminado: {product_id}")
        return snap

    def apply_feed_mutation(self, product: Product, expected: Optional[Product] = None) -> bool:
        """
        Aplica una mutacion del feed.

        Returns:
            True si se aplico; False si el producto ya no existe o cambio
            respecto de expected
        """
        anterior, nuevo = self._dispatch(ApplyFeedMutation(product, expected))
        return nuevo is not anterior

    def set_filters(self, search_term: str = "", category: str = CATEGORY_ALL) -> DashboardSnapshot:
        return self.dispatch(SetFilters(search_term or "", category or CATEGORY_ALL))

    def set_connection_status(self, status: ConnectionStatus) -> DashboardSnapshot:
        return self.dispatch(SetConnectionStatus(status))

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    def get_product(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._state.catalog if p.id == product_id), None)

    def get_trend_series(self, product_id: int) -> Optional[TrendSeries]:
        """
        Serie real + predicha de un producto para graficar.

        Returns:
            TrendSeries, o None si el producto no existe
        """
        snap = self._state
        producto = next((p for p in snap.catalog if p.id == product_id), None)
        prediccion = next((t for t in snap.predictions if t.product_id == product_id), None)
        if producto is None or prediccion is None:
            return None
        return build_trend_series(producto, prediccion)
