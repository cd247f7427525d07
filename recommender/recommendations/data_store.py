from __future__ import annotations

import pandas as pd

from ..catalog.products import CATEGORIES, PRODUCT_RECORDS
from ..catalog.profiles import PROFILE_RECORDS
from .models import Product, UserProfile

_catalog: tuple[Product, ...] | None = None
_by_id: dict[int, Product] | None = None
_profiles: dict[str, UserProfile] | None = None
_df: pd.DataFrame | None = None


def _load_catalog() -> tuple[Product, ...]:
    products = tuple(Product(**record) for record in PRODUCT_RECORDS)
    ids = [p.id for p in products]
    if len(ids) != len(set(ids)):
        raise ValueError("Product catalog contains duplicate ids")
    unknown = sorted({p.category for p in products} - set(CATEGORIES))
    if unknown:
        raise ValueError(f"Product catalog contains unknown categories: {unknown}")
    return products


def get_catalog() -> tuple[Product, ...]:
    """Return the immutable product catalog, loading it on first call."""
    global _catalog, _by_id
    if _catalog is None:
        _catalog = _load_catalog()
        _by_id = {p.id: p for p in _catalog}
    return _catalog


def get_product(product_id: int) -> Product | None:
    """Return the product with ``product_id``, or ``None`` if unknown."""
    get_catalog()
    return _by_id.get(product_id)


def get_profiles() -> dict[str, UserProfile]:
    """Return the simulated user profiles keyed by id, in display order."""
    global _profiles
    if _profiles is None:
        _profiles = {r["id"]: UserProfile(**r) for r in PROFILE_RECORDS}
    return _profiles


def get_profile(user_id: str) -> UserProfile | None:
    return get_profiles().get(user_id)


def get_dataframe() -> pd.DataFrame:
    """Return a tabular view of the catalog, building it on first call."""
    global _df
    if _df is None:
        _df = pd.DataFrame([p.model_dump() for p in get_catalog()]).set_index("id", drop=False)
    return _df
