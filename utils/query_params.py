# utils/query_params.py

from typing import Optional
from fastapi import HTTPException, Query, status
from pydantic import BaseModel

class Pagination(BaseModel):
    limit: int
    offset: int


def pagination_params(default_limit: int, max_limit: int):
    """
    Build a dependency reading `limit`/`offset` from the query string.
    Limits above `max_limit` are capped rather than rejected.
    """
    def dependency(
        limit: Optional[int] = Query(None, description="Page size"),
        offset: int = Query(0, description="Rows to skip"),
    ) -> Pagination:
        resolved = default_limit if limit is None else limit
        if resolved < 1 or offset < 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="limit must be a positive integer and offset must be >= 0"
            )
        return Pagination(limit=min(resolved, max_limit), offset=offset)

    return dependency
