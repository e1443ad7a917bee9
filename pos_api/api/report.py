from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from pos_api.database import get_db
from pos_api.services.report_service import ReportService
from pos_api.services.errors import InvalidInputError
from pos_api.schemas.report import SalesReport

router = APIRouter(prefix="/report", tags=["Reports"])


@router.get(
    "/today",
    response_model=SalesReport,
    summary="Today's sales report",
    description="Revenue, transaction count and best-selling product for the database's current date."
)
def report_today(db: Session = Depends(get_db)):
    """Get the sales report for today."""
    service = ReportService(db)
    return service.report_for_day()


@router.get(
    "/daily",
    response_model=SalesReport,
    summary="Sales report for one day"
)
def report_daily(
    day: Optional[date] = Query(None, alias="date", description="Day to report on (YYYY-MM-DD), default today"),
    db: Session = Depends(get_db)
):
    """Get the sales report for a single day."""
    service = ReportService(db)
    return service.report_for_day(day)


@router.get(
    "",
    response_model=SalesReport,
    summary="Sales report for a date range",
    description="Aggregates transactions created between start_date and end_date, inclusive."
)
def report_range(
    start_date: date = Query(..., description="First day of the range (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last day of the range (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """Get the sales report for a date range."""
    service = ReportService(db)

    try:
        return service.report_for_range(start_date, end_date)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
