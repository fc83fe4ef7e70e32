# ============================================================================
# check_cdap/models.py (consolidated models)
# ============================================================================
from enum import IntEnum

from pydantic import BaseModel, Field


class NagiosState(IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class CheckResult(BaseModel):
    state: NagiosState
    message: str

    def render(self) -> str:
        # Nagios only reads the first stdout line
        message = " ".join(self.message.split())
        return f"{self.state.name} - {message}"


class ServiceStatus(BaseModel):
    name: str = Field(min_length=1)
    status: str = Field(min_length=1)


class StatusReply(BaseModel):
    # 0 stands in for curl's "000": no HTTP response was received
    status_code: int
    body: str = ""
    url: str
