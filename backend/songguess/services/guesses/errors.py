LOCKED_MESSAGE = "Too Late M8, You're stuck with what you picked"


class GuessError(Exception):
    status_code = 400
    message = 'Bad request'

    def __init__(self, detail=None):
        super().__init__(detail or self.message)


class UserNotFoundError(GuessError):
    status_code = 404
    message = 'User not found'


class GuessesLockedError(GuessError):
    status_code = 400
    message = LOCKED_MESSAGE


class InvalidGuessesError(GuessError):
    status_code = 400
    message = 'guesses must be a list'
