"""ETL package - catalog seeding into the database."""

from etl.seed import seed_catalog
from etl.validation import validate_catalog

__all__ = [
    "seed_catalog",
    "validate_catalog",
]
