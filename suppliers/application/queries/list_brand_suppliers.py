"""
ListBrandSuppliersQuery.

Optional equality filters over the supplier collection.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListBrandSuppliersQuery:
    """Query to list suppliers; every filter left as None is ignored."""

    brand_id: Optional[int] = None
    is_active: Optional[bool] = None
