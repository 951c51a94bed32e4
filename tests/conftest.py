import os
import random
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

# Logs de los tests fuera del repo (debe fijarse antes de importar inventario)
os.environ.setdefault("INVENTARIO_LOG_DIR", tempfile.mkdtemp(prefix="inventario-logs-"))

# Ensure project root is on sys.path to allow `import inventario`
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from inventario.data.catalog_loader import load_seed_catalog
from inventario.data.models import Product
from inventario.services.store import InventoryStore

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0)


class FakeClock:
    """Reloj controlable: cada llamada devuelve el instante actual"""

    def __init__(self, start: datetime = FIXED_NOW):
        self.now = start

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seed_catalog():
    return load_seed_catalog(now=FIXED_NOW)


@pytest.fixture
def store(seed_catalog, clock):
    return InventoryStore(seed_catalog, clock=clock)


@pytest.fixture
def rng():
    return random.Random(42)


def make_product(pid=1, name="Producto", sales=(10, 10, 10, 10, 10, 10), stock=10,
                 price=10.0, category="general"):
    return Product(
        id=pid,
        name=name,
        price=price,
        stock=stock,
        category=category,
        sales_data=sales,
        last_updated=FIXED_NOW,
    )


@pytest.fixture
def product_factory():
    return make_product
