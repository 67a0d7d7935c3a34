# src/dbhotel/domain/model/connection_verification.py
from typing import Optional

from pydantic import BaseModel


class ConnectionVerification(BaseModel):
    """Outcome of opening a single test connection"""
    has_succeeded: Optional[bool] = None
    message: Optional[str] = ""

    @classmethod
    def success(cls) -> "ConnectionVerification":
        return cls(has_succeeded=True, message="successful")

    @classmethod
    def failure(cls, message: Optional[str]) -> "ConnectionVerification":
        return cls(has_succeeded=False, message=message)
