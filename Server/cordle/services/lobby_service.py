"""
Lobby Service

Manages the Cordle game areas and which area each player is in.
"""

from typing import Dict, Optional

from ..models.errors import AreaNotFoundError
from ..models.player import Player
from .game_area import CordleGameArea
from .word_provider import WordProvider


class LobbyService:
    """
    Fixed set of game areas.
    Uses simple in-memory state; each area serializes its own commands.
    """

    def __init__(self, area_count: int = 3, word_provider: Optional[WordProvider] = None):
        self.areas: Dict[int, CordleGameArea] = {
            area_id: CordleGameArea(area_id, f'Cordle Room {area_id}', word_provider)
            for area_id in range(1, area_count + 1)
        }
        # Track which area each player is in
        self.player_to_area: Dict[str, int] = {}  # player_id -> area_id

    def get_lobby_state(self) -> Dict:
        """Get current state of all areas."""
        return {
            'success': True,
            'areas': [area.summary() for area in self.areas.values()]
        }

    def get_area(self, area_id) -> CordleGameArea:
        """Look up an area by id; ids may arrive as strings."""
        try:
            area = self.areas.get(int(area_id))
        except (TypeError, ValueError):
            area = None
        if area is None:
            raise AreaNotFoundError()
        return area

    def enter_area(self, player: Player, area_id) -> CordleGameArea:
        """Move a player into an area, leaving the one they were in."""
        area = self.get_area(area_id)

        current_area_id = self.player_to_area.get(player.id)
        if current_area_id is not None and current_area_id != area.id:
            self.leave_area(player)

        area.add_occupant(player)
        self.player_to_area[player.id] = area.id
        return area

    def leave_area(self, player: Player) -> Optional[CordleGameArea]:
        """
        Remove a player from their current area.

        A player seated in a game of that area leaves the game too.

        Returns:
            The area that was left, or None if the player was in no area
        """
        area_id = self.player_to_area.pop(player.id, None)
        if area_id is None:
            return None

        area = self.areas[area_id]
        area.remove_occupant(player)
        return area

    def get_player_area(self, player_id: str) -> Optional[CordleGameArea]:
        """Get the area a player is in."""
        if player_id in self.player_to_area:
            return self.areas[self.player_to_area[player_id]]
        return None

    def cleanup_after_disconnect(self, player: Player) -> Optional[CordleGameArea]:
        """Clean up when a player disconnects."""
        return self.leave_area(player)


# Global service instance
_lobby_service = None


def get_lobby_service() -> Optional[LobbyService]:
    """Get the global lobby service instance."""
    return _lobby_service


def initialize_lobby_service(area_count: int = 3,
                             word_provider: Optional[WordProvider] = None) -> LobbyService:
    """Initialize the global lobby service instance."""
    global _lobby_service
    _lobby_service = LobbyService(area_count, word_provider)
    return _lobby_service
