"""Tests for statistics ordering and newsletter subscribers."""

import pytest

from fullsco.errors import ConflictError, NotFoundError, ValidationFailedError
from fullsco.services.home import StatisticsService, SubscribersService


async def make_stats(service, count):
    return [
        await service.create({"title": f"Stat {i}", "value": str(i * 100), "icon": "star"})
        for i in range(count)
    ]


class TestStatisticOrder:
    @pytest.mark.asyncio
    async def test_new_statistics_append(self, db):
        service = StatisticsService(db)
        stats = await make_stats(service, 3)
        assert [s.order for s in stats] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_explicit_order_kept(self, db):
        stat = await StatisticsService(db).create(
            {"title": "Students", "value": "+1000", "icon": "users", "order": 7}
        )
        assert stat.order == 7


class TestReorder:
    @pytest.mark.asyncio
    async def test_assigns_one_to_n_in_input_order(self, db):
        service = StatisticsService(db)
        a, b, c = await make_stats(service, 3)

        result = await service.reorder([c.id, a.id, b.id])

        assert [s.id for s in result] == [c.id, a.id, b.id]
        assert [s.order for s in result] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_duplicates_rejected(self, db):
        service = StatisticsService(db)
        a, b = await make_stats(service, 2)
        with pytest.raises(ValidationFailedError):
            await service.reorder([a.id, a.id, b.id])

    @pytest.mark.asyncio
    async def test_unknown_id_changes_nothing(self, db):
        service = StatisticsService(db)
        a, b = await make_stats(service, 2)
        with pytest.raises(NotFoundError):
            await service.reorder([b.id, 999, a.id])
        assert [s.id for s in await service.list()] == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_empty_rejected(self, db):
        with pytest.raises(ValidationFailedError):
            await StatisticsService(db).reorder([])


class TestSubscribers:
    @pytest.mark.asyncio
    async def test_email_stored_lowercase(self, db):
        sub = await SubscribersService(db).create({"email": "Student@FullSco.com"})
        assert sub.email == "student@fullsco.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, db):
        service = SubscribersService(db)
        await service.create({"email": "student@fullsco.com"})
        with pytest.raises(ConflictError):
            await service.create({"email": "STUDENT@fullsco.com"})
