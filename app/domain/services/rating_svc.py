from typing import Dict, Iterable, List, Sequence, Union
from app.domain.models.query import ReviewFilter
from app.domain.models.review import Review
from app.domain.services.constants import RATING_STARS

def rating_distribution(reviews: Sequence[Review]) -> Dict[int, float]:
    """
    Percentage of reviews per star value, keys ordered 5 down to 1.
    No reviews gives 0 for every star.
    """
    total = len(reviews)
    counts = {star: 0 for star in RATING_STARS}
    for r in reviews:
        counts[r.rating] += 1
    if total == 0:
        return {star: 0.0 for star in RATING_STARS}
    return {star: 100 * counts[star] / total for star in RATING_STARS}

def rating_chart_series(distribution: Dict[int, float]) -> List[float]:
    """Values in chart order (5 stars first); missing stars count as 0."""
    return [round(distribution.get(star, 0.0), 2) for star in RATING_STARS]

def filter_reviews(reviews: Iterable[Review], review_filter: Union[ReviewFilter, str, None]) -> List[Review]:
    """`verified-reviews` keeps verified purchases only; anything else keeps all."""
    if isinstance(review_filter, str) and not isinstance(review_filter, ReviewFilter):
        review_filter = ReviewFilter.parse(review_filter)
    if review_filter == ReviewFilter.VERIFIED:
        return [r for r in reviews if r.verified]
    return list(reviews)
