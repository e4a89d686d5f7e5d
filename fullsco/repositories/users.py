from fullsco.db.models import User
from fullsco.repositories.base import Repository


class UsersRepository(Repository[User]):
    model = User
    order_by = (User.created_at.desc(), User.id.desc())

    async def find_by_username(self, username: str) -> User | None:
        return await self.find_one_by(username=username)
