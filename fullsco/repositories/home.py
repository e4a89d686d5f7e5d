from sqlalchemy import func, select, update

from fullsco.db.models import Partner, Statistic, Subscriber
from fullsco.repositories.base import Repository


class StatisticsRepository(Repository[Statistic]):
    model = Statistic
    order_by = (Statistic.order, Statistic.id)

    async def max_order(self) -> int:
        result = await self.session.execute(select(func.max(Statistic.order)))
        return result.scalar_one_or_none() or 0

    async def find_ids(self, ids: list[int]) -> set[int]:
        result = await self.session.execute(select(Statistic.id).where(Statistic.id.in_(ids)))
        return set(result.scalars().all())

    async def set_order(self, statistic_id: int, order: int) -> None:
        await self.session.execute(
            update(Statistic).where(Statistic.id == statistic_id).values(order=order)
        )


class PartnersRepository(Repository[Partner]):
    model = Partner


class SubscribersRepository(Repository[Subscriber]):
    model = Subscriber
    order_by = (Subscriber.created_at.desc(), Subscriber.id.desc())
