"""Data Transfer Objects for Item Catalogue Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field


class CreateItemCategoryCommandDTO(BaseModel):
    tenant_id: str = Field(..., description="Tenant identifier")
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_active: bool = True


class CreateItemCommandDTO(BaseModel):
    """
    Command DTO for adding a catalogue item

    Used as input to CreateItem use case.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    name: str = Field(..., min_length=1, description="Item or service name")
    category_id: Optional[str] = Field(default=None, description="Category of the same tenant")
    description: Optional[str] = None
    unit: str = Field(default="Mbps", min_length=1, description="Unit of measure")
    unit_price: Decimal = Field(default=Decimal("0"), ge=0, description="Default rate per unit")
    is_active: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "name": "IIG Bandwidth",
                "unit": "Mbps",
                "unit_price": "100"
            }
        }


class ItemCategoryDTO(BaseModel):
    id: str
    tenant_id: str
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime


class ItemDTO(BaseModel):
    id: str
    tenant_id: str
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    unit: str
    unit_price: Decimal
    is_active: bool
    created_at: datetime


class ListItemCategoriesResponseDTO(BaseModel):
    categories: List[ItemCategoryDTO]


class ListItemsResponseDTO(BaseModel):
    items: List[ItemDTO]
