"""
Ladder Registered Team Model

The registration pool for the next ladder day. Rows are deleted once the
day's matches have been generated.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from ladder.models.user import User


class LadderRegisteredTeam(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # user.id of the registering player; plain column since user.ladder_team_id already references this table
    owner_id: int = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    roster: List["User"] = Relationship(back_populates="ladder_team")
