"""Reference data lookups and seeding."""

from .registry import LookupRegistry
from .seed import SeedReport, seed_reference_data

__all__ = ["LookupRegistry", "SeedReport", "seed_reference_data"]
