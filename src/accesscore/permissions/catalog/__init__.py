"""Default capability catalog of the business suite.

One module per application; each holds a declarative literal that
``Catalog.from_data`` validates into the immutable catalog tree.
"""

from __future__ import annotations

from ..models import Catalog
from .accounting import ACCOUNTING
from .affiliate_connect import AFFILIATE_CONNECT
from .crm import CRM
from .hr import HR
from .operations import OPERATIONS
from .project_management import PROJECT_MANAGEMENT

# Declaration order is display order when sort_order ties.
CATALOG_DATA = (
    CRM,
    HR,
    AFFILIATE_CONNECT,
    PROJECT_MANAGEMENT,
    OPERATIONS,
    ACCOUNTING,
)

DEFAULT_CATALOG = Catalog.from_data(CATALOG_DATA)


__all__ = [
    "CATALOG_DATA",
    "DEFAULT_CATALOG",
]
