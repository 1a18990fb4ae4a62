from pydantic import BaseModel, ConfigDict


class CategoriaBase(BaseModel):
    nombre: str


class CategoriaCreate(CategoriaBase):
    pass


class CategoriaUpdate(CategoriaBase):
    pass


class CategoriaSchema(CategoriaBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
