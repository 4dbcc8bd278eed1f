# Register all models with SQLModel metadata before any test creates tables
from ladder.models.ladder_day import LadderDay  # noqa: F401
from ladder.models.ladder_match import LadderMatch  # noqa: F401
from ladder.models.ladder_player import LadderPlayerInMatch  # noqa: F401
from ladder.models.ladder_registered_team import LadderRegisteredTeam  # noqa: F401
from ladder.models.user import User  # noqa: F401
