from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from pos_api.database import get_db
from pos_api.services.transaction_service import TransactionService
from pos_api.services.errors import (
    InsufficientStockError,
    InvalidInputError,
    NotFoundError,
    ProductNotFoundError
)
from pos_api.schemas.transaction import (
    CheckoutRequest,
    TransactionResponse,
    TransactionListResponse
)

checkout_router = APIRouter(prefix="/checkout", tags=["Checkout"])
router = APIRouter(prefix="/transactions", tags=["Transactions"])


@checkout_router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Check out a basket",
    description="""
    Sell one or more products in a single transaction.

    **Atomicity:**
    Stock checks, stock decrements, the transaction and its detail lines are
    written in one database transaction. If any line fails (unknown product
    or insufficient stock) nothing is written and the error is returned.
    """
)
def checkout(
    checkout_data: CheckoutRequest,
    db: Session = Depends(get_db)
):
    """
    Create a transaction from the requested line items.

    - **items**: list of `{product_id, quantity}`; at least one item,
      quantities must be positive. The same product may appear more than once.
    """
    service = TransactionService(db)

    try:
        return service.checkout(checkout_data.items)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except (InsufficientStockError, InvalidInputError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get(
    "/",
    response_model=TransactionListResponse,
    summary="List all transactions",
    description="Get a paginated list of transactions, newest first."
)
def list_transactions(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=100, description="Items per page"),
    db: Session = Depends(get_db)
):
    """Get paginated list of transactions."""
    service = TransactionService(db)
    transactions, total, total_pages = service.get_transactions(page, page_size)

    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages
    )


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction by ID",
    description="Get a transaction with its detail lines."
)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db)
):
    """Get a transaction by ID."""
    service = TransactionService(db)

    try:
        return service.get_transaction(transaction_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
