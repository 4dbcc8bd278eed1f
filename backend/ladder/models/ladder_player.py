from typing import TYPE_CHECKING, Optional

from sqlalchemy import UniqueConstraint as SAUniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from ladder.models.ladder_match import LadderMatch
    from ladder.models.user import User


class LadderPlayerInMatch(SQLModel, table=True):
    __table_args__ = (SAUniqueConstraint("match_id", "user_id", name="uq_ladder_match_user"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="laddermatch.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    team: str  # "ALPHA" | "BRAVO"

    # Relationships
    match: "LadderMatch" = Relationship(back_populates="players")
    user: "User" = Relationship(back_populates="ladder_matches")
