# pos_api/schemas/report.py
from pydantic import BaseModel, ConfigDict, Field


class DailySalesSchemas(BaseModel):
    """Total vendido em um dia (YYYY-MM-DD)."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    day: str = Field(alias="_id")
    total_amount: float = Field(alias="totalAmount")
