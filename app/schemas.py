from pydantic import BaseModel
from typing import Optional


class ProductBase(BaseModel):
    name: str
    price: Optional[float] = None


class ProductCreate(ProductBase):
    pass


class ProductOut(ProductBase):
    id: int

    class Config:
        from_attributes = True
