"""Authenticated caller models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class Role(StrEnum):
    ADMIN = "ADMIN"
    HR = "HR"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


class Principal(BaseModel):
    """The authenticated identity making the current request.

    Supplied by the authentication collaborator and discarded at request end.
    """

    id: str
    email: str
    role: Role
    employee_id: Optional[str] = None

    model_config = {"frozen": True}
