from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union
from app.domain.models.product import Product
from app.domain.models.query import SortOption

# sort option -> (key extractor, descending)
_SORT_KEYS: Dict[SortOption, Tuple[Callable[[Product], Any], bool]] = {
    SortOption.NEWEST: (lambda p: p.created_at, True),
    SortOption.PRICE_ASC: (lambda p: p.price, False),
    SortOption.PRICE_DESC: (lambda p: p.price, True),
    SortOption.RATING_ASC: (lambda p: p.average_rating, False),
    SortOption.RATING_DESC: (lambda p: p.average_rating, True),
}

def _resolve(sort_option: Union[SortOption, str, None]) -> Optional[SortOption]:
    if isinstance(sort_option, SortOption):
        return sort_option
    try:
        return SortOption(sort_option or "")
    except ValueError:
        return None

def compare_products(a: Product, b: Product, sort_option: Union[SortOption, str, None]) -> int:
    """
    Comparator for the shop sort options.
    Returns 0 when no option (or an unknown one) is given, and on ties of the
    active key, so a stable sort keeps the catalog order for those.
    """
    option = _resolve(sort_option)
    if option not in _SORT_KEYS:
        return 0

    key, descending = _SORT_KEYS[option]
    ka, kb = key(a), key(b)
    if ka == kb:
        return 0
    result = -1 if ka < kb else 1
    return -result if descending else result

def sort_products(products: Iterable[Product], sort_option: Union[SortOption, str, None]) -> List[Product]:
    """Stable sort of products by the given option. Returns a new list."""
    items = list(products)
    if _resolve(sort_option) not in _SORT_KEYS:
        return items
    return sorted(items, key=cmp_to_key(lambda a, b: compare_products(a, b, sort_option)))
