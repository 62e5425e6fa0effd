"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.caching import CacheAsideReader, CacheStore, MemoryCacheStore
from app.caching.duckdb_store import DuckDBCacheStore
from app.repositories.accounts import AddressRepository, UserRepository
from app.repositories.catalog import CategoryRepository, ProductRepository
from app.repositories.db import Database
from app.repositories.sales import AdminRepository, CouponRepository
from app.services.catalog import CatalogService
from app.services.coupons import CouponService
from app.services.dashboard import DashboardService
from settings import CACHE_BACKEND, DB_PATH


def build_store(backend: str, db: Database) -> CacheStore:
    """Cache store for the configured backend."""
    if backend == "memory":
        return MemoryCacheStore()
    if backend == "duckdb":
        return DuckDBCacheStore(db)
    raise ValueError(f"Unknown cache backend: {backend!r}")


class Container:
    """Application DI container - holds all singleton instances.

    ``init`` builds the database, cache store, reader, repositories and
    services; ``close`` tears them down so ``init`` can run again.
    """

    def __init__(self):
        self._initialized = False

    def init(
        self,
        db_path: str = DB_PATH,
        cache_backend: str = CACHE_BACKEND,
        store: CacheStore | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self.db = Database(db_path)
        self.store = store or build_store(cache_backend, self.db)
        self.reader = CacheAsideReader(self.store)

        # Repositories (singletons)
        self.categories = CategoryRepository(self.db, self.reader)
        self.products = ProductRepository(self.db, self.reader)
        self.coupons = CouponRepository(self.db, self.reader)
        self.admin = AdminRepository(self.db, self.reader)
        self.users = UserRepository(self.db, self.reader)
        self.addresses = AddressRepository(self.db, self.reader)

        # Services (with injected repos)
        self.catalog = CatalogService(category_repo=self.categories, product_repo=self.products)
        self.coupon_service = CouponService(coupon_repo=self.coupons)
        self.dashboard = DashboardService(admin_repo=self.admin)

        self._initialized = True
        logger.info("Container initialized: db={}, cache={}", db_path, type(self.store).__name__)

    def close(self) -> None:
        """Close the cache store and database connections."""
        if not self._initialized:
            return
        self.store.close()
        self.db.close()
        self._initialized = False
        logger.info("Container closed")

    @property
    def initialized(self) -> bool:
        return self._initialized


# Global container instance
container = Container()
