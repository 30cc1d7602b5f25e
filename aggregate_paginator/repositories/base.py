"""
Base Repository Pattern

Binds a motor collection to a Pydantic model class and exposes aggregation
and paginated aggregation on it.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import BaseModel

from aggregate_paginator.paginator import OptionsLike, Paginator
from aggregate_paginator.schemas.pagination import Pagination

# Type variable for the model class
T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Generic base repository for paginated aggregations.

    Type Parameters:
        T: The Pydantic model class this repository manages

    Usage:
        class OrderRepository(BaseRepository[Order]):
            collection_name = "orders"
            model_class = Order

        page = await OrderRepository(db).paginate_aggregate(
            [{"$match": {"status": "open"}}, {"$sort": {"created_at": -1}}],
            {"page": 2, "limit": 25, "url": "/api/orders"},
        )
    """

    # Subclasses must define these
    collection_name: str
    model_class: Type[T]

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection: AsyncIOMotorCollection = db[self.collection_name]

    def _to_model_list(self, docs: List[Dict[str, Any]]) -> List[T]:
        """Convert a list of raw documents to model instances."""
        return [self.model_class(**doc) for doc in docs]

    async def aggregate(self, pipeline: List[Dict[str, Any]], limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Run an aggregation pipeline."""
        return await self.collection.aggregate(pipeline).to_list(limit)

    async def paginate_aggregate(
        self,
        pipeline: List[Dict[str, Any]],
        options: OptionsLike = None,
        raw: bool = False,
    ) -> Pagination[Any]:
        """
        Paginate an aggregation pipeline on this collection.

        Args:
            pipeline: Aggregation stages, including any $sort
            options: Page, limit, url, query and projection
            raw: Return raw documents instead of model instances

        Returns:
            Pagination with the page documents and navigation metadata
        """
        paginator: Paginator = Paginator(self.collection, pipeline, options)
        result = await paginator.paginate()
        if raw:
            return result
        return result.model_copy(update={"data": self._to_model_list(result.data)})
