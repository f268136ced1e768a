"""ORM Models: SQLAlchemy declarative models for persisted registry state.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete before create_all / autogenerate
"""

from tokenregistry.models.registry_state import RegistryStateRow  # noqa: F401
from tokenregistry.models.token import TokenRow  # noqa: F401
