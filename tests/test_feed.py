import random
import threading
import time
from dataclasses import replace

import pytest

from inventario.data.models import ConnectionStatus, ProductDraft
from inventario.ml.tendencias import forecast_catalog
from inventario.services.feed import LiveFeed, mutate_product
from inventario.services.store import InventoryStore
from inventario.utils.exceptions import ConfigurationError, FeedConnectionError


def test_mutation_keeps_invariants_over_many_cycles(product_factory, rng, now):
    """Stock nunca negativo y la ventana conserva su largo."""
    producto = product_factory(stock=5, sales=(1, 2, 3, 4, 5, 6))
    for _ in range(2000):
        producto = mutate_product(producto, rng, now)
        assert producto.stock >= 0
        assert len(producto.sales_data) == 6
        assert all(v >= 0 for v in producto.sales_data)
    assert producto.stock == 0


def test_new_sales_are_within_range(product_factory, rng, now):
    producto = product_factory(stock=10_000, sales=(0, 0, 0, 0, 0, 0))
    for _ in range(500):
        producto = mutate_product(producto, rng, now)
    assert all(0 <= v <= 10 for v in producto.sales_data)
    assert any(v > 0 for v in producto.sales_data)


def test_no_new_sale_without_stock(product_factory, rng, now):
    producto = product_factory(stock=0, sales=(1, 2, 3, 4, 5, 6))
    for _ in range(200):
        producto = mutate_product(producto, rng, now)
    assert producto.sales_data == (1, 2, 3, 4, 5, 6)
    assert producto.stock == 0


def test_mutation_is_deterministic_for_a_seed(product_factory, now):
    producto = product_factory(stock=50)
    a = mutate_product(producto, random.Random(7), now)
    b = mutate_product(producto, random.Random(7), now)
    assert a == b
    assert a.last_updated == now


def test_invalid_interval_is_rejected(store):
    with pytest.raises(ConfigurationError):
        LiveFeed(store, interval=0)


def test_tick_before_connect_does_nothing(store, rng):
    feed = LiveFeed(store, interval=3600, rng=rng)
    version = store.version
    assert feed.tick() is None
    assert store.version == version


def test_manual_tick_commits_mutation(store, rng, clock):
    feed = LiveFeed(store, interval=3600, rng=rng, clock=clock)
    assert feed.connect() is True
    try:
        assert feed.is_running
        assert store.snapshot().connection_status is ConnectionStatus.CONNECTED

        version = store.version
        mutado = feed.tick()
        assert mutado is not None
        assert store.get_product(mutado.id) == mutado
        assert store.version == version + 1

        snap = store.snapshot()
        assert [t.product_id for t in snap.predictions] == [p.id for p in snap.catalog]
    finally:
        feed.disconnect()


def test_no_mutations_after_disconnect(store, rng):
    feed = LiveFeed(store, interval=3600, rng=rng)
    feed.connect()
    feed.disconnect()

    version = store.version
    assert feed.tick() is None
    assert store.version == version
    assert not feed.is_running
    assert store.snapshot().connection_status is ConnectionStatus.DISCONNECTED


def test_failed_connection_can_be_retried(store, rng):
    intentos = []

    def conector():
        intentos.append(1)
        if len(intentos) == 1:
            raise FeedConnectionError("Servidor no disponible", endpoint="ws://feed")

    feed = LiveFeed(store, interval=3600, rng=rng, connector=conector)

    assert feed.connect() is False
    assert not feed.is_running
    assert store.snapshot().connection_status is ConnectionStatus.DISCONNECTED

    assert feed.connect() is True
    try:
        assert store.snapshot().connection_status is ConnectionStatus.CONNECTED
    finally:
        feed.disconnect()


def test_connect_twice_keeps_single_loop(store, rng):
    feed = LiveFeed(store, interval=3600, rng=rng)
    try:
        assert feed.connect() is True
        hilo = feed._thread
        assert feed.connect() is True
        assert feed._thread is hilo
    finally:
        feed.disconnect()


def test_tick_on_empty_catalog(rng):
    store = InventoryStore()
    feed = LiveFeed(store, interval=3600, rng=rng)
    feed.connect()
    try:
        assert feed.tick() is None
    finally:
        feed.disconnect()


def test_periodic_loop_mutates_until_disconnected(store, rng):
    feed = LiveFeed(store, interval=0.01, rng=rng)
    version_inicial = store.version
    feed.connect()
    try:
        limite = time.monotonic() + 5
        while store.version <= version_inicial + 3 and time.monotonic() < limite:
            time.sleep(0.01)
        assert store.version > version_inicial + 3
    finally:
        feed.disconnect()

    version = store.version
    time.sleep(0.1)
    assert store.version == version

    snap = store.snapshot()
    assert len(snap.catalog) == 5
    assert all(p.stock >= 0 and len(p.sales_data) == 6 for p in snap.catalog)


def test_readers_never_see_catalog_and_predictions_out_of_sync(store, rng):
    """Con feed y altas/ediciones/bajas concurrentes, cada lectura es consistente."""
    feed = LiveFeed(store, interval=0.001, rng=rng)
    errores = []
    terminado = threading.Event()

    def operador(n):
        for i in range(40):
            producto = store.add_product(ProductDraft(name=f"P{n}-{i}", price=1.0, stock=3))
            store.update_product(replace(producto, name=f"P{n}-{i} editado", stock=5))
            store.delete_product(producto.id)

    def lector():
        while not terminado.is_set():
            snap = store.snapshot()
            if [t.product_id for t in snap.predictions] != [p.id for p in snap.catalog]:
                errores.append("ids desalineados")
            elif snap.predictions != forecast_catalog(snap.catalog):
                errores.append("predicciones de otro catalogo")
            if {t.product_id for t in snap.filtered_predictions} != {p.id for p in snap.filtered_catalog}:
                errores.append("vista filtrada desalineada")

    feed.connect()
    lectores = [threading.Thread(target=lector) for _ in range(2)]
    operadores = [threading.Thread(target=operador, args=(n,)) for n in range(3)]
    try:
        for h in lectores + operadores:
            h.start()
        for h in operadores:
            h.join()
    finally:
        terminado.set()
        for h in lectores:
            h.join()
        feed.disconnect()

    assert errores == []
    assert [p.id for p in store.snapshot().catalog] == [1, 2, 3, 4, 5]
