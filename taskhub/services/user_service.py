"""User service."""
from taskhub.models.user import User
from taskhub.schemas.user import UserCreate
from taskhub.services.base import EntityService


class UserService(EntityService[User]):
    """CRUD for users. Deleting a user leaves references to it dangling."""

    model = User

    def create(self, data: UserCreate) -> User:
        return self._insert(data)

    def delete(self, user_id: str) -> bool:
        user = self.get(user_id)
        if not user:
            return False

        self.session.delete(user)
        self._commit()
        return True
