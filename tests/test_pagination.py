"""
Skip/limit computation and the count-plus-page fetch.
"""

import pytest
from sqlalchemy import select

from src.common.utils.pagination import fetch_page, paginate
from src.models.models import FAQ

pytestmark = pytest.mark.unit


class TestPaginate:
    @pytest.mark.parametrize(
        "page, limit, skip",
        [(1, 10, 0), (2, 10, 10), (3, 5, 10), (1, 1, 0)],
    )
    def test_skip_is_previous_pages(self, page, limit, skip):
        assert paginate(page, limit) == (skip, limit)

    @pytest.mark.parametrize("page", [0, -1, -20])
    def test_pages_below_one_clamp_to_zero(self, page):
        assert paginate(page, 10).skip == 0

    def test_defaults(self):
        window = paginate()
        assert window.skip == 0
        assert window.limit == 10


class TestFetchPage:
    async def _seed(self, db_session, count: int):
        db_session.add_all([FAQ(pregunta=f"q{i:02d}", respuesta="r") for i in range(count)])
        await db_session.commit()

    async def test_page_size_and_offset(self, db_session):
        await self._seed(db_session, 23)
        query = select(FAQ)

        total, first = await fetch_page(db_session, query, 1, 10, FAQ.pregunta)
        _, third = await fetch_page(db_session, query, 3, 10, FAQ.pregunta)

        assert total == 23
        assert [f.pregunta for f in first] == [f"q{i:02d}" for i in range(10)]
        assert [f.pregunta for f in third] == ["q20", "q21", "q22"]

    async def test_total_follows_filter_not_page(self, db_session):
        await self._seed(db_session, 12)
        query = select(FAQ).where(FAQ.pregunta < "q05")

        total, items = await fetch_page(db_session, query, 1, 2, FAQ.pregunta)
        assert total == 5
        assert len(items) == 2

    async def test_page_past_the_end_is_empty(self, db_session):
        await self._seed(db_session, 3)
        total, items = await fetch_page(db_session, select(FAQ), 5, 10)
        assert total == 3
        assert items == []
