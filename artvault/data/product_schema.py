"""Product and cart entry schemas."""
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class Product(BaseModel):
    """A catalog product. Immutable for the lifetime of the session."""
    id: int = Field(..., gt=0, description="Unique, stable product ID")
    title: str = Field(..., min_length=1, max_length=255, description="Display title")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")
    price: int = Field(..., gt=0, description="Price in minor currency units")
    old_price: Optional[int] = Field(None, gt=0, alias="oldPrice", description="Struck-through previous price")
    image: str = Field("", alias="img", description="Image reference")
    
    @field_validator('title', 'category')
    @classmethod
    def validate_not_empty(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()
    
    class Config:
        frozen = True
        populate_by_name = True


class CartEntry(BaseModel):
    """One (product, quantity) pairing in the cart."""
    product_id: int = Field(..., description="ID of a catalog product")
    quantity: int = Field(1, ge=1, description="Units of the product in the cart")
    
    class Config:
        frozen = True
