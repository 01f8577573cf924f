from songguess import db
from songguess.models import User
from songguess.services.guesses.errors import UserNotFoundError


class UserService:
    def get_by_id(self, user_id) -> User:
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            raise UserNotFoundError(f'invalid user id {user_id!r}')
        user = db.session.get(User, pk)
        if user is None:
            raise UserNotFoundError(f'no user with id {pk}')
        return user
