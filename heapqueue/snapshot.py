from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class EntrySnapshot(BaseModel):
    """Read-only copy of one heap entry, as seen at its array position."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    position: int
    value: Any = None
    priority: Optional[Any] = None
