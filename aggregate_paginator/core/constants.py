"""
Shared Constants

Pagination defaults and MongoDB stage operators used across the package.
"""

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10

# Field name the $count stage writes the total into
COUNT_FIELD: str = "totalCount"

# Aggregation stage operators appended to caller pipelines
STAGE_SKIP = "$skip"
STAGE_LIMIT = "$limit"
STAGE_PROJECT = "$project"
STAGE_COUNT = "$count"
