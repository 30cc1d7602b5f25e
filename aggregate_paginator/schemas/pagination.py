"""
Pagination schemas.

`PaginationOptions` is the request-side bundle handed to the paginator,
`Pagination` is the page of documents plus navigation metadata it returns.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aggregate_paginator.core.config import settings

D = TypeVar("D")


class PaginationOptions(BaseModel):
    """
    Options for a single pagination request.

    Falsy values (0, "", None, {}) fall back to the defaults. Negative
    page/limit values are passed through unchanged.
    """

    page: int = Field(
        default_factory=lambda: settings.PAGINATION_DEFAULT_PAGE,
        description="The page number to fetch (1-based)",
    )
    limit: int = Field(
        default_factory=lambda: settings.PAGINATION_DEFAULT_LIMIT,
        description="Number of items per page",
    )
    url: str = Field("", description="Base URL for pagination links")
    query: str = Field(
        "",
        description="Pre-formatted query string without leading '?' or trailing '&'",
        examples=["status=active"],
    )
    project: Optional[Dict[str, Any]] = Field(
        None,
        description="$project stage applied to the page documents",
        examples=[{"_id": 0, "category": 1, "count": 1}],
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("page", mode="before")
    @classmethod
    def default_page(cls, v: Any) -> Any:
        return v or settings.PAGINATION_DEFAULT_PAGE

    @field_validator("limit", mode="before")
    @classmethod
    def default_limit(cls, v: Any) -> Any:
        return v or settings.PAGINATION_DEFAULT_LIMIT

    @field_validator("url", "query", mode="before")
    @classmethod
    def default_empty_string(cls, v: Any) -> Any:
        return v or ""

    @field_validator("project", mode="before")
    @classmethod
    def default_project(cls, v: Any) -> Any:
        return v or None


class Pagination(BaseModel, Generic[D]):
    """
    A page of aggregation results.

    `from_` is exposed as `from` when serialized with `by_alias=True`
    (or via `to_dict()`), since `from` is a Python keyword.
    """

    data: List[D] = Field(default_factory=list)
    first_page_url: str
    last_page_url: str
    next_page_url: Optional[str] = None
    prev_page_url: Optional[str] = None
    path: str = ""
    per_page: int
    from_: int = Field(validation_alias="from", serialization_alias="from")
    to: int
    total: int
    current_page: int
    last_page: int

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping using the public field names."""
        return self.model_dump(by_alias=True)
