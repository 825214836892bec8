# pos_api/api/endpoints/customers.py
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from pos_api import crud, schemas
from pos_api.api import deps
from pos_api.core.logging import logger

router = APIRouter()


@router.get("/customers", response_model=List[schemas.Customer])
async def read_customers(db: AsyncSession = Depends(deps.get_db)) -> Any:
    """
    Recupera a lista de clientes.
    """
    try:
        return await crud.customer.get_multi(db)
    except Exception as e:
        logger.error(f"Erro ao listar clientes: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error fetching customers", "error": str(e)},
        )


@router.post("/customers", response_model=schemas.CustomerCreated, status_code=status.HTTP_201_CREATED)
async def create_customer(
    *,
    db: AsyncSession = Depends(deps.get_db),
    customer_in: schemas.CustomerCreate,
) -> Any:
    """
    Cria um novo cliente.
    """
    try:
        customer = await crud.customer.create(db=db, obj_in=customer_in)
    except Exception as e:
        logger.error(f"Erro ao criar cliente: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Error creating customer", "error": str(e)},
        )
    return schemas.CustomerCreated(
        message="Customer created successfully",
        customer=schemas.Customer.model_validate(customer),
    )
