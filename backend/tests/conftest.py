import os
import sys
import pytest

# Ensure the backend root (containing the `songguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from songguess import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = 4
    GUESS_LOCK_STATUS = ''
    CORS_ORIGINS = ['http://localhost:5173']


class LockedConfig(TestConfig):
    GUESS_LOCK_STATUS = 'locked'


def _make_app(config_class):
    application = create_app(config_class)
    with application.app_context():
        # Ensure models are imported so tables are created
        import songguess.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def flask_app():
    yield from _make_app(TestConfig)


@pytest.fixture()
def locked_app():
    yield from _make_app(LockedConfig)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def create_user(username='alice', password='password'):
    from songguess.models import User
    user = User(username=username)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def login(test_client, username='alice', password='password'):
    res = test_client.post('/login', json={'username': username, 'password': password})
    assert res.status_code == 200
    return res


@pytest.fixture()
def user(flask_app):
    return create_user()


@pytest.fixture()
def auth_client(client, user):
    login(client)
    return client


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
