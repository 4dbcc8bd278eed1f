from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from ladder.models.ladder_player import LadderPlayerInMatch
    from ladder.models.ladder_registered_team import LadderRegisteredTeam


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    discord_id: str = Field(index=True, unique=True)
    username: str
    discriminator: Optional[str] = Field(default=None)  # legacy "#1234" suffix
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Registration roster link (null when not registered for the next ladder day)
    ladder_team_id: Optional[int] = Field(default=None, foreign_key="ladderregisteredteam.id", index=True)

    # Relationships
    ladder_team: Optional["LadderRegisteredTeam"] = Relationship(back_populates="roster")
    ladder_matches: List["LadderPlayerInMatch"] = Relationship(back_populates="user")
