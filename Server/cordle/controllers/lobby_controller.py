"""
Lobby Controller

Handles lobby-related HTTP endpoints.
"""

from flask import Blueprint, jsonify
from ..services.lobby_service import get_lobby_service
from ..utils.game_logger import game_logger

lobby_bp = Blueprint('lobby', __name__)


@lobby_bp.route('/lobby/state', methods=['GET'])
def get_lobby_state():
    """Get current lobby state."""
    try:
        lobby_service = get_lobby_service()
        if not lobby_service:
            return jsonify({
                'success': False,
                'error': 'Lobby service unavailable'
            }), 500

        return jsonify(lobby_service.get_lobby_state())
    except Exception as e:
        game_logger.log_error(None, e, 'get_lobby_state')
        return jsonify({'success': False, 'error': str(e)}), 500
