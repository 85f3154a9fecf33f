from typing import Dict, List
from pydantic import BaseModel, Field
from app.domain.models.comment import ThreadEntry
from app.domain.models.product import Product
from app.domain.models.query import PageNavigation, QueryParams, ReviewFilter
from app.domain.models.review import Review

class ShopPage(BaseModel):
    items: List[Product]
    page: int
    total_pages: int
    total_items: int
    page_size: int
    navigation: PageNavigation
    query: QueryParams
    categories: List[str] = Field(default_factory=list)  # all categories, for the filter form

class ReviewThread(BaseModel):
    review: Review
    comments: List[ThreadEntry] = Field(default_factory=list)  # pre-order, see ThreadEntry.depth

class ProductPage(BaseModel):
    product: Product
    reviews: List[ReviewThread]
    page: int
    total_pages: int
    total_reviews: int
    navigation: PageNavigation
    current_review_filter: ReviewFilter = ReviewFilter.ALL
    rating_distribution: Dict[int, float]  # star -> percent, 5 first
    rating_chart: List[float]
