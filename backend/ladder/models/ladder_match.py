from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from ladder.models.ladder_day import LadderDay
    from ladder.models.ladder_player import LadderPlayerInMatch


class LadderMatch(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    day_id: int = Field(foreign_key="ladderday.id", index=True)
    order: int  # round number: 1 | 2
    maplist: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    day: "LadderDay" = Relationship(back_populates="matches")
    players: List["LadderPlayerInMatch"] = Relationship(back_populates="match")
