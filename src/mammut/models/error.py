"""
Error body returned by the instance instead of the requested entity.
"""

from typing import Optional

from pydantic import BaseModel


class ApiErrorPayload(BaseModel):
    error: str
    error_description: Optional[str] = None
