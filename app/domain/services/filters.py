from typing import Collection
from app.domain.services.constants import KEYWORD_DISTANCE_THRESHOLD, MIN_WORD_LENGTH
from app.domain.services.edit_distance import levenshtein_distance

def match_keyword(product_name: str, keyword: str, threshold: int = KEYWORD_DISTANCE_THRESHOLD) -> bool:
    """
    Fuzzy match of a search keyword against a product name.
    - Empty keyword matches everything.
    - Match if the keyword is within `threshold` edits of the whole name,
      or of any word of the name with at least MIN_WORD_LENGTH characters.
    """
    search = (keyword or "").strip().lower()
    if not search:
        return True

    name = (product_name or "").strip().lower()
    if levenshtein_distance(search, name) <= threshold:
        return True

    # Short words ("de", "the") would match almost any short keyword
    for word in name.split(" "):
        if len(word) >= MIN_WORD_LENGTH and levenshtein_distance(search, word) <= threshold:
            return True
    return False

def match_category(product_category: str, selected: Collection[str]) -> bool:
    """
    Exact (case-sensitive) category membership.
    An empty selection means no filter.
    """
    if not selected:
        return True
    return product_category in selected
