"""
Instancias globales del panel
=============================
Store y feed compartidos por todos los callbacks del proceso.
"""
import random
from typing import Optional

from loguru import logger

from inventario.data.catalog_loader import load_seed_catalog
from inventario.services.feed import LiveFeed
from inventario.services.store import InventoryStore
from inventario.utils.config import AppConfig

_store: Optional[InventoryStore] = None
_feed: Optional[LiveFeed] = None


def init_runtime(config: AppConfig = None) -> InventoryStore:
    """
    Crea el store con el catalogo demo y el feed asociado.

    Si config.autoconnect es True conecta el feed inmediatamente.

    Returns:
        El store recien creado
    """
    global _store, _feed
    config = config or AppConfig()

    shutdown_runtime()

    _store = InventoryStore(load_seed_catalog())
    rng = random.Random(config.feed_seed) if config.feed_seed is not None else random.Random()
    _feed = LiveFeed(_store, interval=config.feed_interval, rng=rng)

    logger.info(f"Panel inicializado con {len(_store.snapshot().catalog)} productos")
    if config.autoconnect:
        _feed.connect()
    return _store


def shutdown_runtime() -> None:
    """Detiene el feed vigente (si lo hay)"""
    if _feed is not None:
        _feed.disconnect()


def get_store() -> InventoryStore:
    """Obtiene instancia singleton del InventoryStore."""
    if _store is None:
        init_runtime(AppConfig(autoconnect=False))
    return _store


def get_feed() -> LiveFeed:
    """Obtiene instancia singleton del LiveFeed."""
    if _feed is None:
        init_runtime(AppConfig(autoconnect=False))
    return _feed
