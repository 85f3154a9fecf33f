from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class Product(BaseModel):
    product_id: int
    name: str
    category: str
    price: float = Field(ge=0)
    calories: int = Field(default=0, ge=0)
    created_at: datetime
    average_rating: float = Field(default=0.0, ge=0, le=5)  # derived from reviews
    description: Optional[str] = None
    img_url: Optional[str] = None
    img_alt_text: Optional[str] = None

    model_config = {"frozen": True}  # immuable = safe

class CategorySales(BaseModel):
    category: str
    units_sold: int = Field(ge=0)
    model_config = {"frozen": True}
