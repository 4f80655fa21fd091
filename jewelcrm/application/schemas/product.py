"""Pydantic DTOs for products and categories."""

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product."""

    name: str = Field(..., min_length=1, max_length=200)
    sku: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    category: int | None = None
    brand: str | None = None
    cost_price: float = Field(0, ge=0)
    selling_price: float = Field(0, ge=0)
    discount_price: float | None = Field(None, ge=0)
    quantity: int = Field(0, ge=0)
    min_quantity: int = Field(0, ge=0)
    max_quantity: int = Field(0, ge=0)
    weight: float | None = None
    material: str | None = None
    color: str | None = None
    size: str | None = None
    status: str = "active"
    is_featured: bool = False
    is_bestseller: bool = False
    tags: list[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """Schema for updating a product — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: int | None = None
    cost_price: float | None = Field(None, ge=0)
    selling_price: float | None = Field(None, ge=0)
    discount_price: float | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    min_quantity: int | None = Field(None, ge=0)
    status: str | None = None
    is_featured: bool | None = None


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    parent: int | None = None
    is_active: bool = True
