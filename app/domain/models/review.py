from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

class Review(BaseModel):
    review_id: int
    product_id: int
    client_id: int
    text: str
    rating: int = Field(ge=1, le=5)
    created_at: datetime
    verified: bool = False  # author purchased the product (set by ReviewRepo)

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("review text must not be empty")
        return v

class MonthlyReviewCount(BaseModel):
    month: date  # first day of the month
    total_reviews: int = Field(ge=0)
    # change against the previous listed month, in %; None for the first month or after a 0 count
    percentage_difference: Optional[float] = None
