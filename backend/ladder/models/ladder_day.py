from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from ladder.models.ladder_match import LadderMatch


class LadderDay(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime = Field(index=True, unique=True)  # naive UTC start time

    # Set by the one request that wins the right to generate this day's matches
    matches_generated: bool = Field(default=False)

    # Relationships
    matches: List["LadderMatch"] = Relationship(back_populates="day")
