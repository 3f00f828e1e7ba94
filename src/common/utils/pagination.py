# src/common/utils/pagination.py
"""Skip/limit pagination shared by every list endpoint."""

from typing import Any, List, NamedTuple, Tuple

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class PageWindow(NamedTuple):
    skip: int
    limit: int


def paginate(page: int = 1, limit: int = 10) -> PageWindow:
    """
    Compute the slice of a result set for a 1-based page number.

    Pages below 1 are clamped so the skip never goes negative.
    """
    return PageWindow(skip=max((page - 1) * limit, 0), limit=limit)


async def fetch_page(
    session: AsyncSession,
    query: Select,
    page: int,
    limit: int,
    *order_by: Any,
) -> Tuple[int, List[Any]]:
    """
    Run a filtered query as a count plus one ordered page.

    The count uses the same filter predicate as the page fetch, so `total`
    does not depend on the page size.
    """
    count_query = select(func.count()).select_from(query.subquery())
    total_result = await session.execute(count_query)
    total = total_result.scalar() or 0

    window = paginate(page, limit)
    if order_by:
        query = query.order_by(*order_by)
    query = query.offset(window.skip).limit(window.limit)

    result = await session.execute(query)
    return total, list(result.scalars().all())
