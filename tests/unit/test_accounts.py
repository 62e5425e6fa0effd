"""Tests for user and address management."""

from datetime import datetime

import pytest

from app.repositories import IntegrityError

HOME = {
    "full_name": "Ada Lovelace",
    "street_address": "12 St James's Square",
    "city": "London",
    "state": "London",
    "postal_code": "SW1Y 4JH",
    "country": "UK",
}


def backdate(db, user_id: str, created_at: datetime) -> None:
    db.connection().execute("UPDATE users SET created_at = ? WHERE id = ?", [created_at, user_id])


def add_order(db, order_id: str, user_id: str) -> None:
    db.connection().execute(
        "INSERT INTO orders (id, user_id, total, created_at) VALUES (?, ?, 10.0, ?)",
        [order_id, user_id, datetime(2026, 3, 1)],
    )


@pytest.fixture
def ada(users):
    return users.create_user("ada@example.com", "Ada")


@pytest.fixture
def grace(users):
    return users.create_user("grace@example.org", "Grace")


class TestUsers:
    def test_create(self, users):
        user = users.create_user(" Ada@Example.com ", "Ada")
        assert user["email"] == "ada@example.com"
        assert user["role"] == "USER"
        assert user["order_count"] == 0

    def test_email_is_unique(self, users, ada):
        with pytest.raises(IntegrityError) as exc:
            users.create_user("ADA@example.com")
        assert exc.value.message == "Email already in use"

    def test_unknown_role(self, users):
        with pytest.raises(IntegrityError):
            users.create_user("root@example.com", role="ROOT")

    def test_order_count(self, db, users, ada, grace):
        add_order(db, "o1", ada["id"])
        add_order(db, "o2", ada["id"])
        assert users.get_user(ada["id"])["order_count"] == 2
        assert users.get_user(grace["id"])["order_count"] == 0

    def test_unknown_user(self, users):
        assert users.get_user("missing") is None
        assert users.update_user("missing", name="X") is None
        assert users.delete_user("missing") is False


class TestListUsers:
    @pytest.fixture
    def three(self, db, users, ada, grace):
        alan = users.create_user("alan@example.com", "Alan")
        backdate(db, ada["id"], datetime(2026, 1, 1))
        backdate(db, grace["id"], datetime(2026, 2, 1))
        backdate(db, alan["id"], datetime(2026, 3, 1))
        return ada, grace, alan

    def test_newest_first(self, users, three):
        listing = users.list_users()
        assert [u["name"] for u in listing["users"]] == ["Alan", "Grace", "Ada"]
        assert listing["pagination"] == {"total": 3, "pages": 1, "page": 1, "limit": 10}

    def test_search_name_or_email(self, users, three):
        assert [u["name"] for u in users.list_users("GRA")["users"]] == ["Grace"]
        assert [u["name"] for u in users.list_users("example.org")["users"]] == ["Grace"]
        assert users.list_users("a")["pagination"]["total"] == 3

    def test_pages(self, users, three):
        listing = users.list_users(page=2, limit=2)
        assert [u["name"] for u in listing["users"]] == ["Ada"]
        assert listing["pagination"] == {"total": 3, "pages": 2, "page": 2, "limit": 2}

    def test_order_count_in_listing(self, db, users, three):
        add_order(db, "o1", three[2]["id"])
        counts = {u["name"]: u["order_count"] for u in users.list_users()["users"]}
        assert counts == {"Alan": 1, "Grace": 0, "Ada": 0}


class TestUpdateUser:
    def test_update_fields(self, users, ada):
        user = users.update_user(ada["id"], name="Countess", email="countess@example.com", role="ADMIN")
        assert (user["name"], user["email"], user["role"]) == ("Countess", "countess@example.com", "ADMIN")

    def test_email_clash(self, users, ada, grace):
        with pytest.raises(IntegrityError) as exc:
            users.update_user(grace["id"], email="ada@example.com")
        assert exc.value.message == "Email already in use"
        assert users.get_user(grace["id"])["email"] == "grace@example.org"

    def test_keep_own_email(self, users, ada):
        assert users.update_user(ada["id"], email="ada@example.com")["email"] == "ada@example.com"

    def test_bad_role(self, users, ada):
        with pytest.raises(IntegrityError):
            users.update_user(ada["id"], role="OWNER")

    def test_no_changes(self, users, ada):
        assert users.update_user(ada["id"]) == ada


class TestDeleteUser:
    def test_cannot_delete_self(self, users, ada):
        with pytest.raises(IntegrityError):
            users.delete_user(ada["id"], acting_user_id=ada["id"])
        assert users.get_user(ada["id"]) is not None

    def test_delete_removes_addresses(self, users, addresses, ada, grace):
        addresses.create_address(ada["id"], **HOME)
        addresses.create_address(grace["id"], **HOME)
        assert users.delete_user(ada["id"], acting_user_id=grace["id"]) is True
        assert users.get_user(ada["id"]) is None
        assert addresses.list_addresses(ada["id"]) == []
        assert len(addresses.list_addresses(grace["id"])) == 1


class TestAddresses:
    def test_create_and_get(self, addresses, ada):
        address = addresses.create_address(ada["id"], **HOME)
        assert address["city"] == "London"
        assert address["is_default"] is False
        assert addresses.get_address(ada["id"], address["id"]) == address

    def test_unknown_user(self, addresses):
        with pytest.raises(IntegrityError):
            addresses.create_address("missing", **HOME)

    def test_one_default_per_user(self, addresses, ada):
        first = addresses.create_address(ada["id"], **HOME, is_default=True)
        second = addresses.create_address(ada["id"], **{**HOME, "city": "Bath"}, is_default=True)
        listing = addresses.list_addresses(ada["id"])
        assert [a["id"] for a in listing] == [second["id"], first["id"]]
        assert [a["is_default"] for a in listing] == [True, False]

    def test_non_default_keeps_existing_default(self, addresses, ada):
        home = addresses.create_address(ada["id"], **HOME, is_default=True)
        addresses.create_address(ada["id"], **{**HOME, "city": "Bath"})
        assert addresses.get_address(ada["id"], home["id"])["is_default"] is True

    def test_set_default(self, addresses, ada):
        home = addresses.create_address(ada["id"], **HOME, is_default=True)
        work = addresses.create_address(ada["id"], **{**HOME, "city": "Bath"})
        assert addresses.set_default(ada["id"], work["id"])["is_default"] is True
        assert addresses.get_address(ada["id"], home["id"])["is_default"] is False

    def test_update_to_default_clears_others(self, addresses, ada):
        home = addresses.create_address(ada["id"], **HOME, is_default=True)
        work = addresses.create_address(ada["id"], **{**HOME, "city": "Bath"})
        updated = addresses.update_address(ada["id"], work["id"], city="Oxford", is_default=True)
        assert (updated["city"], updated["is_default"]) == ("Oxford", True)
        assert addresses.get_address(ada["id"], home["id"])["is_default"] is False

    def test_defaults_are_per_user(self, addresses, ada, grace):
        mine = addresses.create_address(ada["id"], **HOME, is_default=True)
        addresses.create_address(grace["id"], **HOME, is_default=True)
        assert addresses.get_address(ada["id"], mine["id"])["is_default"] is True

    def test_unknown_field(self, addresses, ada):
        home = addresses.create_address(ada["id"], **HOME)
        with pytest.raises(ValueError):
            addresses.update_address(ada["id"], home["id"], user_id="someone-else")

    def test_delete(self, addresses, ada):
        home = addresses.create_address(ada["id"], **HOME)
        assert addresses.delete_address(ada["id"], home["id"]) is True
        assert addresses.delete_address(ada["id"], home["id"]) is False


class TestAddressOwnership:
    def test_other_user_cannot_touch_address(self, addresses, ada, grace):
        home = addresses.create_address(ada["id"], **HOME)
        assert addresses.get_address(grace["id"], home["id"]) is None
        assert addresses.update_address(grace["id"], home["id"], city="Bath") is None
        assert addresses.set_default(grace["id"], home["id"]) is None
        assert addresses.delete_address(grace["id"], home["id"]) is False
        assert addresses.get_address(ada["id"], home["id"])["city"] == "London"
        assert addresses.list_addresses(grace["id"]) == []
