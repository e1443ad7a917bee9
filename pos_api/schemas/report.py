from pydantic import BaseModel
from typing import Optional


class BestSellingProduct(BaseModel):
    """Product with the highest quantity sold in a reporting window."""
    product_id: Optional[int] = None
    name: str = ""
    quantity_sold: int = 0


class SalesReport(BaseModel):
    """Aggregated sales figures for a day or date range."""
    total_revenue: int
    total_transactions: int
    best_selling_product: BestSellingProduct
