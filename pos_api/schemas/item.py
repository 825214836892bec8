# pos_api/schemas/item.py
from typing import Any, List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class ItemBaseSchemas(BaseModel):
    item_code: Optional[str] = None
    item_name: Optional[str] = None
    item_group: Optional[str] = None
    image: Optional[str] = None
    valuation_rate: Optional[float] = None

    # Enriquecimento opcional (cardápio)
    name: Optional[str] = None
    custom_addon_applicable: Optional[int] = None
    custom_combo_applicable: Optional[int] = None
    custom_total_calories: Optional[float] = None
    custom_total_protein: Optional[float] = None
    # Formato livre: cada entrada é guardada como veio
    ingredients: List[Any] = Field(default_factory=list)
    addons: List[Any] = Field(default_factory=list)
    combos: List[Any] = Field(default_factory=list)


class ItemCreateSchemas(ItemBaseSchemas):
    pass


class ItemSchemas(ItemBaseSchemas):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")


class ItemCreatedSchemas(BaseModel):
    message: str
    item: ItemSchemas
