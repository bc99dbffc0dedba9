"""
Game Controller

Handles game area HTTP endpoints. Commands sent over HTTP go through the
same dispatcher as WebSocket commands and are broadcast the same way.
"""

from flask import Blueprint, current_app, request, jsonify
from ..models.errors import AreaNotFoundError, GameIdMismatchError, InvalidParametersError
from ..services.lobby_service import get_lobby_service
from ..utils.decorators import require_player
from ..utils.game_logger import game_logger
from ..websocket.handlers import broadcast_area_update, dispatch_game_command

game_bp = Blueprint('game', __name__)


def _error_status(error: InvalidParametersError) -> int:
    if isinstance(error, AreaNotFoundError):
        return 404
    if isinstance(error, GameIdMismatchError):
        return 409
    return 400


@game_bp.route('/areas/<area_id>/state', methods=['GET'])
def get_area_state(area_id):
    """
    Get the current state of one game area.

    The optional player_id query parameter selects the viewer. It is not
    verified, so passing the first player's id reveals the secret word.
    """
    try:
        lobby_service = get_lobby_service()
        if not lobby_service:
            return jsonify({
                'success': False,
                'error': 'Lobby service unavailable'
            }), 500

        area = lobby_service.get_area(area_id)
        response_data = {
            'success': True,
            'area': area.to_model(request.args.get('player_id'))
        }
        return jsonify(response_data)

    except InvalidParametersError as e:
        return jsonify({'success': False, **e.to_dict()}), _error_status(e)
    except Exception as e:
        game_logger.log_error(request.args.get('player_id'), e, 'get_area_state')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/areas/<area_id>/command', methods=['POST'])
@require_player
def send_command(area_id, player=None):
    """
    Apply a game command on behalf of a player.

    HTTP has no separate enter step, so JoinGame first moves the player into
    the area through the lobby, leaving any area they were in before.
    """
    command = (request.get_json(silent=True) or {}).get('command')
    action = command.get('type') if isinstance(command, dict) else 'command'

    try:
        lobby_service = get_lobby_service()
        if not lobby_service:
            return jsonify({
                'success': False,
                'error': 'Lobby service unavailable'
            }), 500

        # Log user action
        game_logger.log_command(player.id, action, area_id, transport='http', command=command)

        area = lobby_service.get_area(area_id)
        if action == 'JoinGame':
            previous_area = lobby_service.get_player_area(player.id)
            lobby_service.enter_area(player, area.id)
            if previous_area is not None and previous_area is not area:
                broadcast_area_update(previous_area, current_app.socketio)

        result = dispatch_game_command(area, command, player)

        response_data = {
            'success': True,
            'area_id': area.id,
            'result': result,
            'area': area.to_model(player.id)
        }
        game_logger.log_command_result(player.id, action, True, response_data, area.id)

        broadcast_area_update(area, current_app.socketio)
        return jsonify(response_data)

    except InvalidParametersError as e:
        error_response = {'success': False, **e.to_dict()}
        game_logger.log_command_result(player.id, action, False, error_response, area_id)
        return jsonify(error_response), _error_status(e)
    except Exception as e:
        game_logger.log_error(player.id, e, action, area_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_command_result(player.id, action, False, error_response, area_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        lobby_service = get_lobby_service()
        areas = list(lobby_service.areas.values()) if lobby_service else []

        response_data = {
            'status': 'healthy',
            'areas': len(areas),
            'active_games': sum(1 for area in areas if area.summary()['status'] not in (None, 'OVER')),
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(None, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
