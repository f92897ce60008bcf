"""Fixed key layout of the key-value store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageKeys:
    """One key per entity collection, plus the current-user pointer and seed marker.

    Usage:
        keys = StorageKeys.with_prefix("ieosuia_")
        keys.invoices   # "ieosuia_invoices"
    """

    users: str
    current_user: str
    clients: str
    products: str
    invoices: str
    payments: str
    templates: str
    initialized: str

    @classmethod
    def with_prefix(cls, prefix: str) -> "StorageKeys":
        return cls(
            users=f"{prefix}users",
            current_user=f"{prefix}current_user",
            clients=f"{prefix}clients",
            products=f"{prefix}products",
            invoices=f"{prefix}invoices",
            payments=f"{prefix}payments",
            templates=f"{prefix}templates",
            initialized=f"{prefix}initialized",
        )

    def collections(self) -> tuple[str, ...]:
        """Keys that hold entity collections."""
        return (
            self.users,
            self.clients,
            self.products,
            self.invoices,
            self.payments,
            self.templates,
        )
