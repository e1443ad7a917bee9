from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pos_api.database import Base


class Transaction(Base):
    """
    Transaction model representing one completed checkout (receipt header).

    Transactions are immutable once committed.

    Attributes:
        id: Unique identifier for the transaction
        total_amount: Sum of all detail subtotals, in the minor currency unit
        created_at: Timestamp when the checkout was committed
        details: Line items in checkout order
    """
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    total_amount = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    details = relationship(
        "TransactionDetail",
        back_populates="transaction",
        order_by="TransactionDetail.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Transaction(id={self.id}, total_amount={self.total_amount})>"


class TransactionDetail(Base):
    """
    A single line of a transaction.

    The product name is copied at the time of sale so receipts and reports
    don't depend on later catalog edits.
    """
    __tablename__ = "transaction_details"

    id = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(Integer, nullable=False)

    transaction = relationship("Transaction", back_populates="details")

    def __repr__(self):
        return (
            f"<TransactionDetail(id={self.id}, transaction_id={self.transaction_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )
