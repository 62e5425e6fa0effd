"""User repository - admin user management (uncached)."""

import math
from datetime import datetime

from loguru import logger

from app.helpers import new_id
from app.models.accounts import UserRole
from app.repositories.base import BaseRepository
from app.repositories.errors import IntegrityError

_USER_SELECT = """
    SELECT u.id, u.name, u.email, u.role, u.created_at,
           COUNT(o.id)::INTEGER AS order_count
    FROM users u
    LEFT JOIN orders o ON o.user_id = u.id
"""

_USER_GROUP = " GROUP BY u.id, u.name, u.email, u.role, u.created_at"


def _role(value: str) -> str:
    try:
        return UserRole(value).value
    except ValueError as e:
        raise IntegrityError(f"Unknown role: {value!r}") from e


def _email(value: str) -> str:
    email = (value or "").strip().lower()
    if not email:
        raise IntegrityError("Email is required")
    return email


class UserRepository(BaseRepository):
    """Repository for user accounts."""

    def list_users(self, query: str | None = None, page: int = 1, limit: int = 10) -> dict:
        """Users newest first, optionally filtered by name or email.

        Returns ``{"users": [...], "pagination": {total, pages, page, limit}}``.
        """
        page = max(page, 1)
        limit = max(limit, 1)

        clause, params = "", []
        if query:
            clause = " WHERE u.name ILIKE ? OR u.email ILIKE ?"
            params = [f"%{query}%", f"%{query}%"]

        total = self.fetchone(f"SELECT COUNT(*) FROM users u{clause}", params)[0]
        users = self.fetch_dicts(
            f"{_USER_SELECT}{clause}{_USER_GROUP} ORDER BY u.created_at DESC, u.email LIMIT ? OFFSET ?",
            [*params, limit, (page - 1) * limit],
        )
        return {
            "users": users,
            "pagination": {
                "total": total,
                "pages": math.ceil(total / limit),
                "page": page,
                "limit": limit,
            },
        }

    def get_user(self, user_id: str) -> dict | None:
        """User with their order count."""
        return self.fetch_dict(f"{_USER_SELECT} WHERE u.id = ?{_USER_GROUP}", [user_id])

    def get_user_by_email(self, email: str) -> dict | None:
        return self.fetch_dict(f"{_USER_SELECT} WHERE u.email = ?{_USER_GROUP}", [_email(email)])

    def create_user(self, email: str, name: str | None = None, role: str = UserRole.USER) -> dict:
        email = _email(email)
        role = _role(role)
        if self.fetchone("SELECT 1 FROM users WHERE email = ?", [email]):
            raise IntegrityError("Email already in use")

        user_id = new_id()
        self.execute(
            "INSERT INTO users (id, name, email, role, created_at) VALUES (?, ?, ?, ?, ?)",
            [user_id, name, email, role, datetime.now()],
        )
        logger.info("User created: {}", email)
        return self.get_user(user_id)

    def update_user(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
        role: str | None = None,
    ) -> dict | None:
        """Change name, email and/or role. Fields left as None are kept."""
        existing = self.get_user(user_id)
        if existing is None:
            return None

        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = _email(email)
            clash = self.fetchone("SELECT 1 FROM users WHERE email = ? AND id <> ?", [changes["email"], user_id])
            if clash:
                raise IntegrityError("Email already in use")
        if role is not None:
            changes["role"] = _role(role)
        if not changes:
            return existing

        assignments = ", ".join(f"{field} = ?" for field in changes)
        self.execute(f"UPDATE users SET {assignments} WHERE id = ?", [*changes.values(), user_id])
        logger.info("User updated: {}", changes.get("email", existing["email"]))
        return self.get_user(user_id)

    def delete_user(self, user_id: str, acting_user_id: str | None = None) -> bool:
        """Delete a user and their addresses. Admins cannot delete themselves."""
        if acting_user_id is not None and acting_user_id == user_id:
            raise IntegrityError("You cannot delete your own account")
        existing = self.get_user(user_id)
        if existing is None:
            return False

        with self.transaction():
            self.execute("DELETE FROM address WHERE user_id = ?", [user_id])
            self.execute("DELETE FROM users WHERE id = ?", [user_id])
        logger.info("User deleted: {}", existing["email"])
        return True
