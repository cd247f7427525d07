from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..catalog.profiles import DEFAULT_PROFILE_ID
from .data_store import get_catalog, get_product, get_profile
from .models import Product, UserBehavior

logger = logging.getLogger(__name__)


def behavior_for_profile(user_id: str = DEFAULT_PROFILE_ID) -> UserBehavior | None:
    """Return a fresh copy of the profile's starting behavior, or ``None``."""
    profile = get_profile(user_id)
    if profile is None:
        return None
    return profile.behavior.model_copy(deep=True)


def resolve_products(
    product_ids: Iterable[int],
    catalog: Sequence[Product] | None = None,
) -> list[Product]:
    """Map ids to catalog products, keeping order and dropping unknown ids."""
    if catalog is None:
        lookup = get_product
    else:
        by_id = {p.id: p for p in catalog}
        lookup = by_id.get

    products: list[Product] = []
    for pid in product_ids:
        product = lookup(pid)
        if product is None:
            logger.debug("Dropping unknown product id %s", pid)
            continue
        products.append(product)
    return products


def record_view(
    behavior: UserBehavior,
    product_id: int,
    catalog: Sequence[Product] | None = None,
) -> UserBehavior:
    """
    Apply a "mark as viewed" event.

    Returns a new behavior with ``product_id`` appended to ``viewed`` and its
    category appended to ``recent_views``, both without duplicates. Unknown
    product ids leave the behavior unchanged.
    """
    products = resolve_products([product_id], catalog if catalog is not None else get_catalog())
    if not products:
        return behavior.model_copy(deep=True)

    product = products[0]
    viewed = list(behavior.viewed)
    if product.id not in viewed:
        viewed.append(product.id)
    recent = list(behavior.recent_views)
    if product.category not in recent:
        recent.append(product.category)

    return UserBehavior(
        viewed=viewed,
        purchased=list(behavior.purchased),
        recent_views=recent,
    )
