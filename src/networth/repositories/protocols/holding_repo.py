"""Holding repository protocol."""

from decimal import Decimal
from typing import Protocol

from networth.domain.models import Holding, PortfolioJoinedRow


class HoldingRepository(Protocol):
    """Interface for per-user holdings."""

    def get_tickers(self, user_id: str) -> list[str]:
        """Distinct tickers the user holds."""
        ...

    def get_all_joined(self, user_id: str) -> list[PortfolioJoinedRow]:
        """Holdings joined with their catalog asset."""
        ...

    def add_item(self, holding: Holding) -> Holding:
        """Persist a new holding. Raises ValidationError if it already exists."""
        ...

    def update(self, user_id: str, ticker: str, quantity: Decimal, avg_buy_price: Decimal) -> Holding:
        """Change quantity and average buy price. Raises NotFoundError if missing."""
        ...

    def delete(self, user_id: str, ticker: str) -> int:
        """Delete a holding; returns the number of rows removed."""
        ...
