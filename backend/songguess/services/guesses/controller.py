from typing import List, Optional

from .errors import GuessesLockedError, InvalidGuessesError, UserNotFoundError
from .ranking import build_guesses, ordered_titles

LOCKED = 'locked'


class GuessController:
    """Read and replace a user's ranked song guesses.

    - `users` resolves an opaque user id via `get_by_id`
    - `messages` receives `notify_data_update()` after each saved update
    - `lock_status` equal to "locked" rejects every update up front
    """

    def __init__(self, users, messages, lock_status: Optional[str] = None):
        self.users = users
        self.messages = messages
        self.lock_status = lock_status

    @property
    def locked(self) -> bool:
        return self.lock_status == LOCKED

    def _lookup(self, user_id):
        try:
            return self.users.get_by_id(user_id)
        except Exception as exc:
            raise UserNotFoundError() from exc

    def get_guesses(self, user_id) -> List[str]:
        user = self._lookup(user_id)
        return ordered_titles(user.guesses)

    def update_guesses(self, user_id, titles) -> None:
        if self.locked:
            raise GuessesLockedError()
        if not isinstance(titles, list):
            raise InvalidGuessesError()

        user = self._lookup(user_id)
        # Wholesale replacement; no merge with previous guesses
        user.guesses = build_guesses(titles)
        user.save()

        self.messages.notify_data_update()
