"""Schema baselines: strict responses, tolerant requests."""

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Neutral strict base for response DTOs."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class RequestModel(BaseModel):
    """Request DTO base; unknown JSON keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class MessageResponse(StrictModel):
    message: str
