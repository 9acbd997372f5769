"""
Business logic for members.

Members register with a name, email and password.  Passwords are
stored as PBKDF2 hashes and never leave the service.  Logging in
returns a signed access token whose subject is the member's email.
"""

import logging
import sqlite3
from typing import List

from room_escape_api.app.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    MemberNotFoundError,
)
from room_escape_api.app.core.security import create_access_token, hash_password, verify_password
from room_escape_api.app.models import ROLE_USER, Member
from room_escape_api.app.repositories import MemberRepository
from room_escape_api.app.schemas.member import LoginRequest, MemberCreate, MemberProfile, TokenResponse

logger = logging.getLogger(__name__)


class MemberService:
    """Registration, login and lookup of members."""

    def __init__(self, member_repository: MemberRepository) -> None:
        self.member_repository = member_repository

    async def signup(self, data: MemberCreate) -> MemberProfile:
        """Register a new member with the ``USER`` role.

        Raises ``DuplicateEmailError`` if the email is already registered.
        """
        if self.member_repository.exists_by_email(data.email):
            raise DuplicateEmailError(f"Email {data.email} is already registered")
        member = Member(
            id=None,
            name=data.name,
            email=data.email,
            password=hash_password(data.password),
            role=ROLE_USER,
        )
        try:
            saved = self.member_repository.save(member)
        except sqlite3.IntegrityError as exc:
            raise DuplicateEmailError(f"Email {data.email} is already registered") from exc
        logger.info("Registered member %s (%s)", saved.id, saved.email)
        return MemberProfile.from_member(saved)

    async def login(self, data: LoginRequest) -> TokenResponse:
        member = self.member_repository.find_by_email(data.email)
        if member is None or not verify_password(data.password, member.password):
            logger.warning("Failed login for %s", data.email)
            raise AuthenticationError("Incorrect email or password")
        return TokenResponse(access_token=create_access_token({"sub": member.email}))

    async def get_profile(self, member_id: int) -> MemberProfile:
        member = self.member_repository.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return MemberProfile.from_member(member)

    async def list_members(self) -> List[MemberProfile]:
        return [MemberProfile.from_member(member) for member in self.member_repository.find_all()]
