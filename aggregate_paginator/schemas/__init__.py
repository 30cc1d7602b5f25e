from aggregate_paginator.schemas.pagination import Pagination, PaginationOptions

__all__ = ["Pagination", "PaginationOptions"]
