# beerstock/schemas/beer.py
from pydantic import BaseModel, ConfigDict, Field, model_validator

from beerstock.models.beer import BeerType


class BeerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    brand: str = Field(..., min_length=1, max_length=200)
    max: int = Field(..., gt=0, le=500)
    quantity: int = Field(..., ge=0, le=500)
    type: BeerType


class BeerCreate(BeerBase):
    @model_validator(mode="after")
    def check_quantity_within_max(self) -> "BeerCreate":
        if self.quantity > self.max:
            raise ValueError("quantity cannot be greater than max")
        return self


class BeerRead(BeerBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., gt=0, le=500)  # la API siempre manda positivo
