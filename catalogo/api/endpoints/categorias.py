from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalogo.controllers.categoria_controller import categoria_controller
from catalogo.core.database import get_categoria_db
from catalogo.core.exceptions import CategoriaNotFound
from catalogo.schemas.categoria_schemas import (
    CategoriaCreate,
    CategoriaSchema,
    CategoriaUpdate,
)
from catalogo.schemas.error_schemas import ErrorResponse

router = APIRouter(prefix="/categorias")


@router.get("", response_model=List[CategoriaSchema])
async def list_categorias(db: Session = Depends(get_categoria_db)):
    """
    Lists every categoria.
    """
    return categoria_controller.get_all(db)


@router.get(
    "/{categoria_id}",
    response_model=CategoriaSchema,
    responses={404: {"model": ErrorResponse}},
)
async def get_categoria(categoria_id: int, db: Session = Depends(get_categoria_db)):
    categoria = categoria_controller.get(db, categoria_id)
    if categoria is None:
        raise CategoriaNotFound(categoria_id)
    return categoria


@router.post("", response_model=CategoriaSchema, status_code=status.HTTP_201_CREATED)
async def create_categoria(
    categoria_in: CategoriaCreate, db: Session = Depends(get_categoria_db)
):
    """
    Creates a categoria. The id is assigned by the database.
    """
    return categoria_controller.create(db, obj_in=categoria_in)


@router.put(
    "/{categoria_id}",
    response_model=CategoriaSchema,
    responses={404: {"model": ErrorResponse}},
)
async def update_categoria(
    categoria_id: int,
    categoria_in: CategoriaUpdate,
    db: Session = Depends(get_categoria_db),
):
    categoria = categoria_controller.replace(db, id=categoria_id, obj_in=categoria_in)
    if categoria is None:
        raise CategoriaNotFound(categoria_id)
    return categoria


@router.delete(
    "/{categoria_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_categoria(categoria_id: int, db: Session = Depends(get_categoria_db)):
    """
    Deletes a categoria. Productos that reference it are left untouched.
    """
    if not categoria_controller.exists(db, categoria_id):
        raise CategoriaNotFound(categoria_id)
    categoria_controller.remove(db, id=categoria_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
