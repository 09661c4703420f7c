"""
Pydantic model for the greeting endpoint.
"""

from typing import Optional

from pydantic import BaseModel


class HelloRead(BaseModel):
    message: str
    method: str
    timestamp: Optional[str] = None
