"""
MongoDB aggregate paginator.

    from aggregate_paginator import Paginator, Pagination

    paginator = Paginator(collection, pipeline, {"page": 2, "url": "/api/data"})
    response: Pagination = await paginator.paginate()
"""

from aggregate_paginator.paginator import Paginator, paginate
from aggregate_paginator.repositories.base import BaseRepository
from aggregate_paginator.schemas.pagination import Pagination, PaginationOptions

__all__ = [
    "Paginator",
    "paginate",
    "Pagination",
    "PaginationOptions",
    "BaseRepository",
]
