from flask_socketio import emit
from songguess import socketio

WS_NAMESPACE = '/ws'


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_ping(data):
    emit('pong', data or {})


class ServerMessagesGateway:
    """Broadcasts server-side change signals to every client on /ws."""

    def __init__(self, sio, namespace: str = WS_NAMESPACE):
        self.sio = sio
        self.namespace = namespace

    def notify_data_update(self) -> None:
        # No payload; clients refetch whatever they display
        self.sio.emit('data_update', namespace=self.namespace)


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace=WS_NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=WS_NAMESPACE)
