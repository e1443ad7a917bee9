from sqlalchemy.orm import Session
from sqlalchemy import func, desc
from datetime import date
from typing import Optional

from pos_api.models.product import Product
from pos_api.models.transaction import Transaction, TransactionDetail
from pos_api.schemas.report import BestSellingProduct, SalesReport
from pos_api.services.errors import InvalidInputError


class ReportService:
    """
    Read-only sales aggregates over committed transactions.

    A reporting window is matched on the calendar date of `created_at`;
    ranges are inclusive on both ends. Empty windows report zeros rather
    than failing.
    """

    def __init__(self, db: Session):
        self.db = db

    def report_for_day(self, day: Optional[date] = None) -> SalesReport:
        """
        Aggregate transactions created on `day`.

        Without a day the database's CURRENT_DATE is used, so "today" comes
        from the same clock that stamped `created_at`.
        """
        if day is None:
            return self._report(func.date(Transaction.created_at) == func.current_date())
        return self.report_for_range(day, day)

    def report_for_range(self, start: date, end: date) -> SalesReport:
        """
        Aggregate transactions created between `start` and `end`, inclusive.

        Raises:
            InvalidInputError: If start is after end
        """
        if start > end:
            raise InvalidInputError(f"start_date {start} is after end_date {end}")

        return self._report(func.date(Transaction.created_at).between(start, end))

    def _report(self, in_window) -> SalesReport:
        total_revenue, total_transactions = (
            self.db.query(
                func.coalesce(func.sum(Transaction.total_amount), 0),
                func.count(Transaction.id),
            )
            .filter(in_window)
            .one()
        )

        return SalesReport(
            total_revenue=total_revenue,
            total_transactions=total_transactions,
            best_selling_product=self._best_selling_product(in_window),
        )

    def _best_selling_product(self, in_window) -> BestSellingProduct:
        """Product with the highest summed quantity; ties go to the lowest ID."""
        quantity_sold = func.sum(TransactionDetail.quantity).label("quantity_sold")

        row = (
            self.db.query(Product.id, Product.name, quantity_sold)
            .join(TransactionDetail, TransactionDetail.product_id == Product.id)
            .join(Transaction, TransactionDetail.transaction_id == Transaction.id)
            .filter(in_window)
            .group_by(Product.id, Product.name)
            .order_by(desc("quantity_sold"), Product.id)
            .first()
        )

        if row is None:
            return BestSellingProduct()

        return BestSellingProduct(
            product_id=row.id,
            name=row.name,
            quantity_sold=row.quantity_sold,
        )
