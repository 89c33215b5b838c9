from typing import List, Optional

from pydantic import Field, model_validator

from .common import CamelModel
from .job import JobRead
from .team import TeamRead
from ..models.job import JobStatus


class OperationsLogin(CamelModel):
    password: str = Field(min_length=4)


class OperationsPanel(CamelModel):
    team: TeamRead
    jobs: List[JobRead]


class JobStatusUpdate(CamelModel):
    team_id: Optional[int] = None
    # Legacy link token
    token: Optional[str] = Field(default=None, min_length=4)
    password: str = Field(min_length=4)
    status: JobStatus
    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    cancellation_reason: Optional[str] = None

    @model_validator(mode="after")
    def require_team_reference(self) -> "JobStatusUpdate":
        if self.team_id is None and not self.token:
            raise ValueError("Either teamId or token must be provided")
        return self
