"""
Player Identity Decorators

Contains decorators that resolve the calling player for HTTP and WebSocket
handlers.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from .helpers import get_player_identity


def require_player(f):
    """
    Decorator for HTTP endpoints that act on behalf of a player.

    The JSON body must carry a player_id; the resolved Player is passed as
    the ``player`` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        player = get_player_identity(request.get_json(silent=True))
        if player is None:
            return jsonify({
                'success': False,
                'error': 'player_id is required'
            }), 400

        kwargs['player'] = player
        return f(*args, **kwargs)

    return decorated_function


def websocket_player_required(f):
    """Decorator for WebSocket events; the payload must carry a player_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        player = get_player_identity(args[0] if args else None)
        if player is None:
            emit('error', {'error': 'player_id is required', 'error_type': 'InvalidCommandError'})
            return

        kwargs['player'] = player
        return f(*args, **kwargs)

    return decorated_function
