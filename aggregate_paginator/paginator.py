"""
MongoDB Aggregate Paginator

Splits the results of an aggregation pipeline into pages and builds the
navigation metadata (first/last/next/previous URLs, item ranges, totals)
for the requested page.

Usage:
    paginator = Paginator(collection, pipeline, {
        "page": 1,
        "limit": 10,
        "url": "/api/data",
        "query": "status=active",
        "project": {"_id": 0, "category": 1, "count": 1},
    })
    result = await paginator.paginate()
"""

import logging
import math
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel

from aggregate_paginator.core.constants import (
    COUNT_FIELD,
    STAGE_COUNT,
    STAGE_LIMIT,
    STAGE_PROJECT,
    STAGE_SKIP,
)
from aggregate_paginator.schemas.pagination import Pagination, PaginationOptions

logger = logging.getLogger(__name__)

D = TypeVar("D")

OptionsLike = Union[PaginationOptions, Mapping[str, Any], None]


def _resolve_options(options: OptionsLike) -> PaginationOptions:
    """Build PaginationOptions from a model, a plain mapping or None."""
    if options is None:
        return PaginationOptions()
    if isinstance(options, PaginationOptions):
        return options
    return PaginationOptions(**options)


class Paginator(Generic[D]):
    """
    Paginate the results of a MongoDB aggregation pipeline.

    The caller's pipeline is copied on construction and never modified;
    skip/limit/projection stages are appended to fresh lists for each query.
    Any error raised by the collection propagates to the caller unchanged.

    Type Parameters:
        D: Type of the documents in `Pagination.data`. Raw dicts unless a
           `model_class` is given.
    """

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        pipeline: List[Dict[str, Any]],
        options: OptionsLike = None,
        *,
        model_class: Optional[Type[BaseModel]] = None,
    ):
        self.collection = collection
        self.pipeline: List[Dict[str, Any]] = list(pipeline)
        self.options = _resolve_options(options)
        self.model_class = model_class

    @property
    def page(self) -> int:
        return self.options.page

    @property
    def limit(self) -> int:
        return self.options.limit

    @property
    def url(self) -> str:
        return self.options.url

    @property
    def query(self) -> str:
        return self.options.query

    @property
    def project(self) -> Optional[Dict[str, Any]]:
        return self.options.project

    async def paginate(self) -> Pagination[D]:
        """
        Fetch the requested page and build its pagination metadata.

        The count query only runs when the page has data. An empty page is
        reported as total 0 on a single page, whichever page was requested.
        """
        data = await self.get_data()
        total = await self.get_total_count() if data else 0
        total_pages = math.ceil(total / self.limit) if total > 0 else 1

        logger.debug(
            f"Paginated aggregation: page {self.page}/{total_pages}, "
            f"limit {self.limit}, {len(data)} documents, total {total}"
        )

        if total > 0:
            from_ = 1 if self.page == 1 else (self.page - 1) * self.limit + 1
        else:
            from_ = 0

        return Pagination(
            data=data,
            first_page_url=self.get_first_page_url(),
            last_page_url=self.get_last_page_url(total_pages),
            next_page_url=self.get_next_page_url(total_pages),
            prev_page_url=self.get_previous_page_url(),
            path=self.url,
            per_page=self.limit,
            from_=from_,
            to=total if self.page == total_pages else self.page * self.limit,
            total=total,
            current_page=self.page,
            last_page=total_pages,
        )

    def build_data_pipeline(self) -> List[Dict[str, Any]]:
        """Caller pipeline + $skip + $limit (+ $project when set)."""
        pipeline = [
            *self.pipeline,
            {STAGE_SKIP: (self.page - 1) * self.limit},
            {STAGE_LIMIT: self.limit},
        ]
        if self.project:
            pipeline.append({STAGE_PROJECT: self.project})
        return pipeline

    def build_count_pipeline(self) -> List[Dict[str, Any]]:
        """Caller pipeline + $count."""
        return [*self.pipeline, {STAGE_COUNT: COUNT_FIELD}]

    async def get_data(self) -> List[Any]:
        """Run the page query and return its documents."""
        docs = await self.collection.aggregate(self.build_data_pipeline()).to_list(None)
        if self.model_class is not None:
            return [self.model_class(**doc) for doc in docs]
        return docs

    async def get_total_count(self) -> int:
        """Run the count query and return the number of matching documents."""
        result = await self.collection.aggregate(self.build_count_pipeline()).to_list(1)
        if not result:
            # Documents removed between the page and count queries
            return 0
        return result[0][COUNT_FIELD]

    def _page_url(self, page: int) -> str:
        prefix = f"{self.query}&" if self.query else ""
        return f"{self.url}?{prefix}page={page}"

    def get_first_page_url(self) -> str:
        return self._page_url(1)

    def get_last_page_url(self, last_page: int) -> str:
        return self._page_url(last_page)

    def get_previous_page_url(self) -> Optional[str]:
        """URL of the previous page, or None on the first page."""
        if self.page == 1:
            return None
        return self._page_url(self.page - 1)

    def get_next_page_url(self, last_page: int) -> Optional[str]:
        """URL of the next page, or None on the last page."""
        if self.page == last_page:
            return None
        return self._page_url(self.page + 1)


async def paginate(
    collection: AsyncIOMotorCollection,
    pipeline: List[Dict[str, Any]],
    options: OptionsLike = None,
    *,
    model_class: Optional[Type[BaseModel]] = None,
) -> Pagination[Any]:
    """Paginate `pipeline` on `collection` in one call."""
    paginator: Paginator = Paginator(collection, pipeline, options, model_class=model_class)
    return await paginator.paginate()
