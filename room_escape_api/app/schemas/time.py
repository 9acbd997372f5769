"""Pydantic models for reservation times."""

from datetime import time

from pydantic import BaseModel, Field

from room_escape_api.app.models import Time


class TimeCreate(BaseModel):
    start_at: time = Field(..., examples=["12:00"])


class TimeResponse(BaseModel):
    id: int
    start_at: time

    @classmethod
    def from_time(cls, reservation_time: Time) -> "TimeResponse":
        return cls(id=reservation_time.id, start_at=reservation_time.start_at)
