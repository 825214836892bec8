# pos_api/api/endpoints/items.py
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api import crud, schemas
from pos_api.api import deps
from pos_api.core.logging import logger

router = APIRouter()


@router.get("/items", response_model=List[schemas.Item])
async def read_items(db: AsyncSession = Depends(deps.get_db)) -> Any:
    """
    Recupera o catálogo completo de itens (sem paginação).
    """
    try:
        return await crud.item.get_multi(db)
    except Exception as e:
        logger.error(f"Erro ao listar itens: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error fetching items", "error": str(e)},
        )


@router.post("/items", response_model=schemas.ItemCreated, status_code=status.HTTP_201_CREATED)
async def create_item(
    *,
    db: AsyncSession = Depends(deps.get_db),
    item_in: schemas.ItemCreate,
) -> Any:
    """
    Cria um novo item. O código do item não é único.
    """
    try:
        item = await crud.item.create(db=db, obj_in=item_in)
    except Exception as e:
        logger.error(f"Erro ao criar item: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Error creating item", "error": str(e)},
        )
    return schemas.ItemCreated(message="Item created successfully", item=schemas.Item.model_validate(item))
