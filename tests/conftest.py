import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless Qt for timers and signals
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from catalogview.domain.models import Product  # noqa: E402

from fakes import InMemoryCatalog, make_variant  # noqa: E402


@pytest.fixture
def product() -> Product:
    return Product(id="prod-1", title="Basic Tee", handle="basic-tee", shop_id="shop-1")


@pytest.fixture
def catalog(product: Product) -> InMemoryCatalog:
    return InMemoryCatalog(
        product=product,
        variants=[
            make_variant("a", index=0, title="Small"),
            make_variant("b", index=1, title="Medium"),
            make_variant("c", index=2, title="Large"),
            make_variant("d", index=3, title="XL"),
        ],
    )
