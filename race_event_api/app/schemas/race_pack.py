"""
Pydantic models for race-pack inventory.

A race pack line item tracks how many units of an item (shirts, medals,
bib numbers ...) are in stock for an event and how many have been
handed out.  ``distributed_quantity`` may never exceed
``stock_quantity``; the check runs on creation and again on the merged
record after every update.
"""

from typing import Optional

from pydantic import Field, model_validator

from .base import CamelModel


class RacePackBase(CamelModel):
    event_id: int
    name: str = Field(..., examples=["Event T-Shirt"])
    sku: str = Field(..., examples=["TS-MAR-2023"])
    category: str = Field(..., examples=["Apparel"])
    stock_quantity: int = Field(..., ge=0, examples=[850])
    distributed_quantity: int = Field(0, ge=0, examples=[682])

    @model_validator(mode="after")
    def check_not_overdrawn(self) -> "RacePackBase":
        if self.distributed_quantity > self.stock_quantity:
            raise ValueError("distributedQuantity cannot exceed stockQuantity")
        return self


class RacePackCreate(RacePackBase):
    pass


class RacePackUpdate(CamelModel):
    event_id: Optional[int] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    stock_quantity: Optional[int] = Field(None, ge=0)
    distributed_quantity: Optional[int] = Field(None, ge=0)


class RacePack(RacePackBase):
    id: int
