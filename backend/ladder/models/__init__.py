from ladder.models.ladder_day import LadderDay
from ladder.models.ladder_match import LadderMatch
from ladder.models.ladder_player import LadderPlayerInMatch
from ladder.models.ladder_registered_team import LadderRegisteredTeam
from ladder.models.user import User

__all__ = [
    "User",
    "LadderRegisteredTeam",
    "LadderDay",
    "LadderMatch",
    "LadderPlayerInMatch",
]
