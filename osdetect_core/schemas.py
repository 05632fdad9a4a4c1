"""Pydantic schemas for osdetect."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OsInfo(BaseModel):
    """Detected operating system information.

    Instances are immutable; ``model_copy()`` produces an equal, independent value.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    architecture: str
    additional_info: Optional[str] = None
