"""User settings repository protocol."""

from typing import Protocol


class SettingsRepository(Protocol):
    """Interface for per-user preferences."""

    def get_base_currency(self, user_id: str) -> str:
        """Base currency for the user (application default when unset)."""
        ...

    def set_base_currency(self, user_id: str, currency: str) -> None:
        """Store the user's base currency."""
        ...

    def list_currencies(self) -> list[str]:
        """Supported base currency codes, sorted."""
        ...

    def is_supported_currency(self, code: str) -> bool:
        """Whether a code may be used as a base currency."""
        ...
