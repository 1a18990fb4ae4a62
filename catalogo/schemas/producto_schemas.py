from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ProductoBase(BaseModel):
    """
    `categoriaId` is the wire name; `categoria_id` is accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    nombre: str
    precio: Decimal
    stock: int = 0
    categoria_id: Optional[int] = Field(None, alias="categoriaId")


class ProductoCreate(ProductoBase):
    pass


class ProductoUpdate(BaseModel):
    """
    Full replace of nombre, precio and categoriaId.
    `stock` is only written when it is present in the request.
    """

    model_config = ConfigDict(populate_by_name=True)

    nombre: str
    precio: Decimal
    categoria_id: Optional[int] = Field(None, alias="categoriaId")
    stock: Optional[int] = None


class ProductoSchema(ProductoBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int

    @field_serializer("precio")
    def serialize_precio(self, precio: Decimal) -> float:
        return float(precio)
