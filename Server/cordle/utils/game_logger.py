"""
Game Logger Module for the Cordle Server

This module provides structured logging for player commands, server
responses and game events.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the Cordle server.

    Features:
    - Player command tracking with player/area identification
    - Command result logging
    - Game event logging (created, started, won, drawn, forfeited)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('cordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Create log file with date
        log_file = self._log_file()

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          player_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'player': player_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_command(self,
                    player_id: Optional[str],
                    action: str,
                    area_id: Optional[int] = None,
                    transport: str = 'websocket',
                    **kwargs):
        """
        Log a player command with full context.

        Args:
            player_id: Id of the player issuing the command
            action: Type of command (e.g., 'JoinGame', 'GameMove', 'join_area')
            area_id: Game area identifier if applicable
            transport: 'websocket' or 'http'
            **kwargs: Additional details to log
        """
        details = {
            'area_id': area_id,
            'transport': transport,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, {'player_id': player_id}, details)
        self.logger.info(log_message)

    def log_command_result(self,
                           player_id: Optional[str],
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           area_id: Optional[int] = None,
                           **kwargs):
        """
        Log the outcome of a command.

        Args:
            player_id: Id of the player who issued the command
            action: Command that was handled
            success: Whether the command was applied
            response_data: Data sent back to the caller
            area_id: Game area identifier if applicable
            **kwargs: Additional details to log
        """
        safe_response = self._sanitize_response_data(response_data)

        details = {
            'area_id': area_id,
            'success': success,
            'response_data': safe_response,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, {'player_id': player_id}, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       game_id: str,
                       event: str,
                       player_id: Optional[str],
                       **kwargs):
        """
        Log game-specific events (starts, wins, draws, forfeits).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_started', 'game_won')
            player_id: Player the event is attributed to
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, {'player_id': player_id}, details)
        self.logger.info(log_message)

    def log_error(self,
                  player_id: Optional[str],
                  error: Exception,
                  action: str,
                  area_id: Optional[int] = None):
        """
        Log unexpected errors with full context.

        Args:
            player_id: Player whose command failed, if known
            error: Exception that occurred
            action: Action that was being performed
            area_id: Game area identifier if applicable
        """
        details = {
            'area_id': area_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, {'player_id': player_id}, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Mask the secret word and trim large snapshots."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        # Create a copy to avoid modifying original
        sanitized = data.copy()

        area = sanitized.get('area')
        if isinstance(area, dict):
            game = area.get('game') or {}
            state = game.get('state') or {}
            sanitized['area'] = {
                'id': area.get('id'),
                'game_id': game.get('id'),
                'status': state.get('status'),
                'guesses_count': len(state.get('guesses', [])),
                'winner': state.get('winner'),
                'secret_revealed': state.get('secret_word') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        try:
            log_file = self._log_file()
            if not log_file.exists():
                return {'error': 'No log file found for today'}

            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif '"ERROR"' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
