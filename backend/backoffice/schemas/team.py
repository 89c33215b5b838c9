from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel
from ..models.team import TeamStatus


class TeamCreate(CamelModel):
    name: str = Field(min_length=2)
    status: Optional[TeamStatus] = None
    leader: Optional[str] = None
    notes: Optional[str] = None
    members: List[str] = Field(min_length=1)


class TeamUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2)
    status: Optional[TeamStatus] = None
    leader: Optional[str] = None
    notes: Optional[str] = None
    members: Optional[List[str]] = Field(default=None, min_length=1)
    operation_pass: Optional[str] = Field(default=None, min_length=4)


class TeamRead(CamelModel):
    """Team as returned by the API. The portal password is never echoed."""

    id: int
    name: str
    status: TeamStatus
    leader: Optional[str] = None
    notes: Optional[str] = None
    members: List[str] = []
    operation_token: Optional[str] = None
    has_operation_pass: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_team(cls, team) -> "TeamRead":
        read = cls.model_validate(team)
        read.has_operation_pass = bool(team.operation_pass)
        return read
