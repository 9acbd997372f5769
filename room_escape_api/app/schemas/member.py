"""
Pydantic models for member data.

Defines schemas for registering members, logging in and reading
member information.  Password hashes are never returned through the
API.
"""

from pydantic import BaseModel, Field

from room_escape_api.app.models import Member


class MemberCreate(BaseModel):
    """Schema for registering a member."""

    name: str = Field(..., min_length=1, examples=["Bumblebee"])
    email: str = Field(..., min_length=3, examples=["member@example.com"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class LoginRequest(BaseModel):
    email: str = Field(..., examples=["member@example.com"])
    password: str = Field(..., examples=["strongpassword"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class MemberSummary(BaseModel):
    """Short member projection embedded in reservation responses."""

    id: int
    name: str

    @classmethod
    def from_member(cls, member: Member) -> "MemberSummary":
        return cls(id=member.id, name=member.name)


class MemberProfile(BaseModel):
    """The authenticated caller as seen by the service layer."""

    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_member(cls, member: Member) -> "MemberProfile":
        return cls(id=member.id, name=member.name, email=member.email, role=member.role)
