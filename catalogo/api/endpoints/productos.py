from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Response, status
from sqlalchemy.orm import Session

from catalogo.core.database import get_producto_db
from catalogo.schemas.categoria_schemas import CategoriaSchema
from catalogo.schemas.error_schemas import ErrorResponse
from catalogo.schemas.producto_schemas import (
    ProductoCreate,
    ProductoSchema,
    ProductoUpdate,
)
from catalogo.services.categoria_client import CategoriaClient
from catalogo.services.producto_service import ProductoService

router = APIRouter(prefix="/productos")

producto_service = ProductoService(CategoriaClient())


def get_producto_service() -> ProductoService:
    return producto_service


@router.get("", response_model=List[ProductoSchema])
async def list_productos(
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
):
    return service.list_productos(db)


@router.get(
    "/{producto_id}",
    response_model=ProductoSchema,
    responses={404: {"model": ErrorResponse}},
)
async def get_producto(
    producto_id: int,
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
):
    return service.get_producto(db, producto_id)


@router.post("", response_model=ProductoSchema, status_code=status.HTTP_201_CREATED)
async def create_producto(
    producto_in: ProductoCreate,
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
):
    """
    Creates a producto. `categoriaId` is not checked against the categoria
    service; a dangling reference only shows up on the categoria lookup.
    """
    return service.create_producto(db, producto_in)


@router.put(
    "/{producto_id}",
    response_model=ProductoSchema,
    responses={404: {"model": ErrorResponse}},
)
async def update_producto(
    producto_id: int,
    producto_in: ProductoUpdate,
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
):
    return service.update_producto(db, producto_id, producto_in)


@router.delete("/{producto_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_producto(
    producto_id: int,
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
):
    service.delete_producto(db, producto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{producto_id}/categoria",
    response_model=CategoriaSchema,
    responses={
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def get_categoria_of_producto(
    producto_id: int,
    db: Session = Depends(get_producto_db),
    service: ProductoService = Depends(get_producto_service),
    x_request_timeout: Optional[float] = Header(None),
):
    """
    Returns the categoria of a producto, fetched from the categoria service.
    `X-Request-Timeout` (seconds) caps the outbound call.
    """
    return await service.get_categoria_of_producto(
        db, producto_id, deadline=x_request_timeout
    )
