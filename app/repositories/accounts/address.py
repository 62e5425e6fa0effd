"""Address repository - a user's shipping addresses (uncached).

Every lookup is scoped by user id, so one user never sees or edits
another user's address.
"""

from datetime import datetime

from loguru import logger

from app.helpers import new_id
from app.repositories.base import BaseRepository
from app.repositories.errors import IntegrityError

_ADDRESS_COLUMNS = """
    id, user_id, full_name, street_address, city, state, postal_code, country, is_default
"""

_UPDATABLE = (
    "full_name",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "is_default",
)


class AddressRepository(BaseRepository):
    """Repository for user addresses. At most one default per user."""

    def list_addresses(self, user_id: str) -> list[dict]:
        """Default address first, then oldest first."""
        return self.fetch_dicts(
            f"SELECT {_ADDRESS_COLUMNS} FROM address WHERE user_id = ? ORDER BY is_default DESC, created_at, id",
            [user_id],
        )

    def get_address(self, user_id: str, address_id: str) -> dict | None:
        return self.fetch_dict(
            f"SELECT {_ADDRESS_COLUMNS} FROM address WHERE id = ? AND user_id = ?",
            [address_id, user_id],
        )

    def _clear_default(self, user_id: str) -> None:
        self.execute("UPDATE address SET is_default = FALSE WHERE user_id = ? AND is_default", [user_id])

    def create_address(
        self,
        user_id: str,
        full_name: str,
        street_address: str,
        city: str,
        state: str,
        postal_code: str,
        country: str,
        is_default: bool = False,
    ) -> dict:
        if not self.fetchone("SELECT 1 FROM users WHERE id = ?", [user_id]):
            raise IntegrityError(f"User not found: {user_id}")

        address_id = new_id()
        with self.transaction():
            if is_default:
                self._clear_default(user_id)
            self.execute(
                """
                INSERT INTO address (id, user_id, full_name, street_address, city, state,
                                     postal_code, country, is_default, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [address_id, user_id, full_name, street_address, city, state,
                 postal_code, country, bool(is_default), datetime.now()],
            )
        logger.info("Address created for user {}", user_id)
        return self.get_address(user_id, address_id)

    def update_address(self, user_id: str, address_id: str, **changes) -> dict | None:
        existing = self.get_address(user_id, address_id)
        if existing is None:
            return None

        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Unknown address fields: {sorted(unknown)}")
        if not changes:
            return existing

        assignments = ", ".join(f"{field} = ?" for field in changes)
        with self.transaction():
            if changes.get("is_default"):
                self._clear_default(user_id)
            self.execute(
                f"UPDATE address SET {assignments} WHERE id = ? AND user_id = ?",
                [*changes.values(), address_id, user_id],
            )
        logger.info("Address updated: {}", address_id)
        return self.get_address(user_id, address_id)

    def delete_address(self, user_id: str, address_id: str) -> bool:
        if self.get_address(user_id, address_id) is None:
            return False
        self.execute("DELETE FROM address WHERE id = ? AND user_id = ?", [address_id, user_id])
        logger.info("Address deleted: {}", address_id)
        return True

    def set_default(self, user_id: str, address_id: str) -> dict | None:
        """Make one address the user's default, clearing the previous one."""
        if self.get_address(user_id, address_id) is None:
            return None
        with self.transaction():
            self._clear_default(user_id)
            self.execute(
                "UPDATE address SET is_default = TRUE WHERE id = ? AND user_id = ?",
                [address_id, user_id],
            )
        logger.info("Default address for user {}: {}", user_id, address_id)
        return self.get_address(user_id, address_id)
