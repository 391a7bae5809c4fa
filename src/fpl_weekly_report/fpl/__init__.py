"""FPL API integration modules for gameweek and team data."""

from .gameweek import find_current_gameweek
from .team import get_team_payload

__all__ = [
    "find_current_gameweek",
    "get_team_payload",
]
