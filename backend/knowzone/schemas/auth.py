"""
Signup and profile schemas.

Signup is a tagged union on ``role``: students and alumni carry academic
fields, faculty carry staff fields, and a payload may not mix the two.
"""
from pydantic import ConfigDict, EmailStr, Field, RootModel, field_validator
from typing import Annotated, List, Literal, Optional, Union

from knowzone.models.base import CamelModel


class _SignupBase(CamelModel):
    model_config = ConfigDict(extra="forbid")

    firebase_uid: str = Field(..., min_length=1)
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    college_id: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    branch: str = Field(..., min_length=1)

    linkedin_url: Optional[str] = None
    profile_image: Optional[str] = None
    bus_id: Optional[str] = None


class StudentSignup(_SignupBase):
    role: Literal["student"]
    usn: Optional[str] = None
    batch: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None


class AlumniSignup(_SignupBase):
    role: Literal["alumni"]
    usn: Optional[str] = None
    batch: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None


class FacultySignup(_SignupBase):
    role: Literal["faculty"]
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)
    subjects: Optional[List[str]] = None


SignupPayload = Union[StudentSignup, AlumniSignup, FacultySignup]


class SignupRequest(RootModel[Annotated[SignupPayload, Field(discriminator="role")]]):
    """Request body for POST /auth/signup"""


class ProfileUpdate(CamelModel):
    """Partial profile edit. Identity, email and role are fixed at signup."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    college_id: Optional[str] = None
    department: Optional[str] = None
    branch: Optional[str] = None

    usn: Optional[str] = None
    batch: Optional[str] = None
    year: Optional[str] = None
    status: Optional[str] = None

    employee_id: Optional[str] = None
    designation: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)
    subjects: Optional[List[str]] = None

    linkedin_url: Optional[str] = None
    profile_image: Optional[str] = None
    bus_id: Optional[str] = None

    @field_validator("name", "college_id", "department", "branch")
    @classmethod
    def required_fields_not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be cleared")
        return v
