"""
Feed Simulado de Actualizaciones en Tiempo Real
===============================================

Simula un feed externo: cada `interval` segundos elige un producto al azar,
le aplica una mutacion acotada (stock y ventana de ventas) y la confirma en
el store, que recalcula todas las predicciones en el mismo commit.

La fuente aleatoria, el reloj y la conexion son inyectables para que el feed
sea determinista en tests.

Ejemplo de uso:
    feed = LiveFeed(store, interval=5.0, rng=random.Random(42))
    if not feed.connect():
        ...  # estado DISCONNECTED en el store; se puede reintentar connect()
    ...
    feed.disconnect()
"""
import random
import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from inventario.data.models import ConnectionStatus, Product
from inventario.services.store import InventoryStore
from inventario.utils.constants import (
    INTERVALO_FEED_DEFAULT,
    PROB_BAJA_STOCK,
    PROB_NUEVA_VENTA,
    RANGO_VENTA_SIMULADA,
)
from inventario.utils.exceptions import ConfigurationError

# Reintentos de lectura-modificacion-escritura ante ediciones concurrentes
MAX_REINTENTOS = 3


def mutate_product(product: Product, rng: random.Random, now: datetime) -> Product:
    """
    Aplica una mutacion aleatoria acotada a un producto.

    - Con probabilidad PROB_BAJA_STOCK descuenta una unidad (minimo 0).
    - Con probabilidad PROB_NUEVA_VENTA, y solo si queda stock, agrega una
      venta al final de la ventana y descarta la mas antigua.
    - Actualiza last_updated.

    Args:
        product: Producto vigente
        rng: Fuente pseudoaleatoria
        now: Instante de la mutacion

    Returns:
        Nuevo Product (el original no se modifica)
    """
    baja_stock = rng.random() < PROB_BAJA_STOCK
    nueva_venta = rng.random() < PROB_NUEVA_VENTA

    stock = max(0, product.stock - 1) if baja_stock else product.stock

    ventas = product.sales_data
    if nueva_venta and stock > 0 and ventas:
        ventas = ventas[1:] + (rng.randint(*RANGO_VENTA_SIMULADA),)

    return replace(product, stock=stock, sales_data=ventas, last_updated=now)


def _conexion_simulada() -> None:
    """Establece la conexion simulada (siempre disponible)"""
    logger.debug("Conexion simulada establecida")


class LiveFeed:
    """
    Ciclo de reconciliacion en tiempo real.

    connect() arranca un thread daemon que ejecuta tick() cada `interval`
    segundos; disconnect() lo detiene y espera a que termine. Luego de
    disconnect() no se emite ninguna mutacion mas.
    """

    def __init__(
        self,
        store: InventoryStore,
        interval: float = INTERVALO_FEED_DEFAULT,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = None,
        connector: Callable[[], None] = None
    ):
        """
        Inicializa el feed.

        Args:
            store: Store donde se confirman las mutaciones
            interval: Segundos entre mutaciones
            rng: Fuente pseudoaleatoria (default: random.Random())
            clock: Fuente de tiempo (default: datetime.now)
            connector: Funcion que establece la conexion; si lanza una
                excepcion (p. ej. FeedConnectionError) el feed queda desconectado
        """
        if interval <= 0:
            raise ConfigurationError(f"El intervalo del feed debe ser > 0: {interval}")

        self._store = store
        self.interval = interval
        self._rng = rng or random.Random()
        self._clock = clock or datetime.now
        self._connector = connector or _conexion_simulada

        self._stop = threading.Event()
        self._stop.set()
        self._thread: Optional[threading.Thread] = None
        self._lifecycle_lock = threading.Lock()
        self._tick_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stop.is_set()
        )

    def connect(self) -> bool:
        """
        Establece la conexion y arranca el ciclo periodico.

        Nunca lanza: ante un error de conexion deja el estado en
        DISCONNECTED y retorna False. Puede reintentarse.

        Returns:
            True si el feed quedo conectado
        """
        with self._lifecycle_lock:
            if self.is_running:
                return True

            try:
                self._connector()
            except Exception as e:
                logger.error(f"No se pudo conectar el feed en tiempo real: {e}")
                self._store.set_connection_status(ConnectionStatus.DISCONNECTED)
                return False

            stop = threading.Event()
            self._stop = stop
            self._thread = threading.Thread(
                target=self._run, args=(stop,), name="live-feed", daemon=True
            )
            self._store.set_connection_status(ConnectionStatus.CONNECTED)
            self._thread.start()

        logger.info(f"Feed en tiempo real conectado (intervalo {self.interval}s)")
        return True

    def disconnect(self) -> None:
        """Detiene el ciclo y espera a que termine cualquier mutacion en curso"""
        with self._lifecycle_lock:
            self._stop.set()
            thread, self._thread = self._thread, None
            if thread is not None and thread is not threading.current_thread():
                thread.join(timeout=self.interval + 1.0)
            # Espera un tick manual en curso
            with self._tick_lock:
                pass
            self._store.set_connection_status(ConnectionStatus.DISCONNECTED)

        if thread is not None:
            logger.info("Feed en tiempo real desconectado")

    def tick(self) -> Optional[Product]:
        """
        Ejecuta una mutacion inmediata.

        Returns:
            Producto mutado y confirmado, o None si el feed esta detenido,
            el catalogo esta vacio o el producto fue eliminado
        """
        return self._tick(self._stop)

    def _tick(self, stop: threading.Event) -> Optional[Product]:
        with self._tick_lock:
            for _ in range(MAX_REINTENTOS):
                if stop.is_set():
                    return None

                catalogo = self._store.snapshot().catalog
                if not catalogo:
                    return None

                original = self._rng.choice(catalogo)
                mutado = mutate_product(original, self._rng, self._clock())

                if self._store.apply_feed_mutation(mutado, expected=original):
                    logger.debug(
                        f"Mutacion feed: producto {mutado.id} stock={mutado.stock} "
                        f"ventas={list(mutado.sales_data)}"
                    )
                    return mutado

                if self._store.get_product(original.id) is None:
                    logger.debug(f"Producto {original.id} eliminado antes del commit")
                    return None

            logger.warning("Mutacion del feed descartada por ediciones concurrentes")
            return None

    def _run(self, stop: threading.Event) -> None:
        while not stop.wait(self.interval):
            try:
                self._tick(stop)
            except Exception:
                logger.exception("Error aplicando mutacion del feed")
