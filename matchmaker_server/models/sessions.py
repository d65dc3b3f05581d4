"""Session reset models."""

from typing import Optional

from pydantic import BaseModel


class ResetSessionRequest(BaseModel):
    actor_id: Optional[str] = None
