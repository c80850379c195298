from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from app.utils.misc import get_utc_iso_now


T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    status: Literal["success", "error"] = "success"
    data: T | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=get_utc_iso_now)
