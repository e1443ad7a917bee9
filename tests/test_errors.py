"""Tests for error responses."""
from sqlalchemy.exc import OperationalError

from pos_api.main import app
from pos_api.database import get_db
from pos_api.services.errors import InsufficientStockError


class UnreachableSession:
    """Session stand-in whose every query fails like a dropped connection."""

    def query(self, *args, **kwargs):
        raise OperationalError(
            "SELECT categories.id FROM categories",
            {},
            Exception("could not connect to server at db.internal:5432"),
        )

    def rollback(self):
        pass

    def close(self):
        pass


def unreachable_db():
    db = UnreachableSession()
    try:
        yield db
    finally:
        db.close()


def test_storage_failure_returns_generic_500(client):
    """Test a database error becomes a 500 without leaking internal detail."""
    previous = app.dependency_overrides[get_db]
    app.dependency_overrides[get_db] = unreachable_db
    try:
        response = client.get("/api/categories/")
    finally:
        app.dependency_overrides[get_db] = previous

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "db.internal" not in response.text
    assert "SELECT" not in response.text


def test_storage_failure_on_checkout_returns_generic_500(client):
    """Test a database error during checkout is reported the same way."""
    previous = app.dependency_overrides[get_db]
    app.dependency_overrides[get_db] = unreachable_db
    try:
        response = client.post(
            "/api/checkout",
            json={"items": [{"product_id": 1, "quantity": 1}]}
        )
    finally:
        app.dependency_overrides[get_db] = previous

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "db.internal" not in response.text


def test_insufficient_stock_error_without_product():
    """Test the constraint-violation form carries no product ID."""
    error = InsufficientStockError()

    assert error.product_id is None
    assert "concurrent modification" in str(error)


def test_insufficient_stock_error_with_product():
    """Test the shortfall form names the product and quantities."""
    error = InsufficientStockError(7, available=2, requested=5)

    assert error.product_id == 7
    assert str(error) == "Insufficient stock for product 7. Available: 2, Requested: 5"
