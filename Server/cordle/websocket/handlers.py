"""
WebSocket Event Handlers

Handles all WebSocket events for real-time Cordle games: entering and
leaving game areas, routing game commands to the area dispatcher and
broadcasting updated area state.
"""

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from ..models.errors import InvalidParametersError
from ..services.lobby_service import get_lobby_service
from ..utils.decorators import websocket_player_required
from ..utils.game_logger import game_logger
from ..utils.helpers import prepare_game_command

# Simple tracking of connected players
connected_players = {}  # player_id -> socket_id
socket_players = {}  # socket_id -> Player


def area_room(area_id) -> str:
    return f"area_{area_id}"


def dispatch_game_command(area, command, player):
    """Run gateway checks, then apply the command in the area."""
    dictionary = area.word_provider.dictionary() if current_app.config.get('REQUIRE_DICTIONARY_WORDS') else None
    return area.handle_command(prepare_game_command(command, dictionary), player)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """
        Handle WebSocket disconnection; a seated player forfeits.

        A socket replaced by a newer one for the same player is dropped
        without touching the player's area.
        """
        player = socket_players.pop(request.sid, None)
        if player is None:
            return
        if connected_players.get(player.id) != request.sid:
            return
        del connected_players[player.id]

        lobby_service = get_lobby_service()
        if not lobby_service:
            return

        area = lobby_service.cleanup_after_disconnect(player)
        if area:
            game_logger.log_command(player.id, 'disconnect', area.id)
            broadcast_area_update(area, socketio)

    @socketio.on('join_lobby')
    def handle_join_lobby(data=None):
        """Join the lobby for real-time area updates."""
        lobby_service = get_lobby_service()
        if not lobby_service:
            emit('error', {'error': 'Lobby service unavailable'})
            return

        join_room("lobby")
        emit('lobby_state_update', lobby_service.get_lobby_state())

    @socketio.on('join_area')
    @websocket_player_required
    def handle_join_area(data, player=None):
        """Enter a game area and subscribe to its updates."""
        lobby_service = get_lobby_service()
        if not lobby_service:
            emit('error', {'error': 'Lobby service unavailable'})
            return

        game_logger.log_command(player.id, 'join_area', data.get('area_id'))
        try:
            previous_area = lobby_service.get_player_area(player.id)
            area = lobby_service.enter_area(player, data.get('area_id'))
        except InvalidParametersError as e:
            game_logger.log_command_result(player.id, 'join_area', False, e.to_dict())
            emit('error', e.to_dict())
            return

        if previous_area is not None and previous_area is not area:
            leave_room(area_room(previous_area.id))
            broadcast_area_update(previous_area, socketio)

        connected_players[player.id] = request.sid
        socket_players[request.sid] = player
        join_room(area_room(area.id))

        broadcast_area_update(area, socketio)

    @socketio.on('leave_area')
    @websocket_player_required
    def handle_leave_area(data, player=None):
        """Leave the current game area."""
        lobby_service = get_lobby_service()
        if not lobby_service:
            return

        area = lobby_service.leave_area(player)
        if area is None:
            emit('error', {'error': 'Not in any area', 'error_type': 'AreaNotFoundError'})
            return

        game_logger.log_command(player.id, 'leave_area', area.id)
        leave_room(area_room(area.id))
        emit('area_left', {'area_id': area.id})
        broadcast_area_update(area, socketio)

    @socketio.on('game_command')
    @websocket_player_required
    def handle_game_command(data, player=None):
        """Apply a game command; only the caller hears about failures."""
        lobby_service = get_lobby_service()
        if not lobby_service:
            emit('error', {'error': 'Lobby service unavailable'})
            return

        area_id = data.get('area_id')
        command = data.get('command')
        action = command.get('type') if isinstance(command, dict) else None
        game_logger.log_command(player.id, action or 'game_command', area_id, command=command)

        try:
            area = lobby_service.get_area(area_id)
            result = dispatch_game_command(area, command, player)
        except InvalidParametersError as e:
            game_logger.log_command_result(player.id, action, False, e.to_dict(), area_id)
            emit('error', e.to_dict())
            return
        except Exception as e:
            game_logger.log_error(player.id, e, action or 'game_command', area_id)
            emit('error', {'error': 'Internal server error', 'error_type': 'ServerError'})
            return

        response_data = {'success': True, 'area_id': area.id, 'result': result}
        game_logger.log_command_result(player.id, action, True, response_data, area_id)
        emit('command_result', response_data)
        broadcast_area_update(area, socketio)


def broadcast_area_update(area, socketio):
    """
    Broadcast the area state to everyone in the area.

    Observers get the public snapshot; the player seated first additionally
    gets a snapshot that includes the secret word.
    """
    socketio.emit('area_state_update', {
        'success': True,
        'area': area.to_model()
    }, to=area_room(area.id))

    holder = area.secret_holder()
    if holder and holder in connected_players:
        socketio.emit('area_state_update', {
            'success': True,
            'area': area.to_model(holder)
        }, to=connected_players[holder])

    lobby_service = get_lobby_service()
    if lobby_service:
        socketio.emit('lobby_state_update', lobby_service.get_lobby_state(), to="lobby")
