from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required

from songguess.services.guesses.errors import GuessError, UserNotFoundError


guesses = Blueprint('guesses', __name__)


def _controller():
    return current_app.extensions['guess_controller']


@guesses.errorhandler(GuessError)
def handle_guess_error(exc: GuessError):
    if isinstance(exc, UserNotFoundError):
        current_app.logger.error(f"[guess] user lookup failed user={request.headers.get('From')!r}: {exc.__cause__ or exc}")
    return jsonify({'message': exc.message}), exc.status_code


@guesses.route('', methods=['GET'])
@login_required
def get_user_guesses():
    user_id = request.headers.get('From')
    titles = _controller().get_guesses(user_id)
    return jsonify({'guesses': titles})


@guesses.route('', methods=['POST'])
@login_required
def update_user_guesses():
    user_id = request.headers.get('From')
    data = request.get_json(silent=True)
    submitted = data.get('guesses') if isinstance(data, dict) else None
    _controller().update_guesses(user_id, submitted)
    current_app.logger.info(f"[guess] updated user={user_id} count={len(submitted)}")
    return '', 204
