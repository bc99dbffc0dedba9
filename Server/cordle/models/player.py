"""
Player Data Models

Contains player-related data structures.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Player:
    """A connected player, identified by an opaque id."""
    id: str
    username: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.username or self.id

    def to_dict(self) -> Dict:
        return {'id': self.id, 'username': self.display_name}
