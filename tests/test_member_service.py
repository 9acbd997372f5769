import base64
import json

import pytest

from room_escape_api.app.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    MemberNotFoundError,
)
from room_escape_api.app.core.config import settings
from room_escape_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from room_escape_api.app.models import ROLE_USER
from room_escape_api.app.repositories import MemberRepository
from room_escape_api.app.schemas.member import LoginRequest, MemberCreate
from room_escape_api.app.services.member_service import MemberService

PASSWORD = "Sup3rSecurePwd!"


@pytest.fixture()
def member_service(conn) -> MemberService:
    return MemberService(MemberRepository(conn))


@pytest.mark.anyio
async def test_signup_stores_hashed_password(conn, member_service) -> None:
    profile = await member_service.signup(MemberCreate(name="Bee", email="bee@example.com", password=PASSWORD))

    stored = MemberRepository(conn).find_by_id(profile.id)
    assert profile.role == ROLE_USER
    assert stored.password != PASSWORD
    assert verify_password(PASSWORD, stored.password)


@pytest.mark.anyio
async def test_signup_rejects_duplicate_email(member_service) -> None:
    await member_service.signup(MemberCreate(name="Bee", email="bee@example.com", password=PASSWORD))

    with pytest.raises(DuplicateEmailError):
        await member_service.signup(MemberCreate(name="Other", email="bee@example.com", password="other"))


@pytest.mark.anyio
async def test_login_returns_token_for_member(member_service) -> None:
    await member_service.signup(MemberCreate(name="Bee", email="bee@example.com", password=PASSWORD))

    token = await member_service.login(LoginRequest(email="bee@example.com", password=PASSWORD))

    assert decode_access_token(token.access_token)["sub"] == "bee@example.com"


@pytest.mark.anyio
@pytest.mark.parametrize("email, password", [("bee@example.com", "wrong"), ("nobody@example.com", PASSWORD)])
async def test_login_rejects_bad_credentials(member_service, email, password) -> None:
    await member_service.signup(MemberCreate(name="Bee", email="bee@example.com", password=PASSWORD))

    with pytest.raises(AuthenticationError):
        await member_service.login(LoginRequest(email=email, password=password))


@pytest.mark.anyio
async def test_get_profile_of_unknown_member(member_service) -> None:
    with pytest.raises(MemberNotFoundError):
        await member_service.get_profile(42)


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "bee@example.com"}, expires_delta=-10)
    assert decode_access_token(token) is None


def test_tampered_token_is_rejected() -> None:
    header, payload, signature = create_access_token({"sub": "bee@example.com"}).split(".")
    forged = create_access_token({"sub": "admin@example.com"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("not-a-token") is None


def test_password_hash_is_salted() -> None:
    first, second = hash_password(PASSWORD), hash_password(PASSWORD)

    assert first != second
    assert verify_password(PASSWORD, first)
    assert not verify_password("other", first)
    assert not verify_password(PASSWORD, "garbage")


def test_token_header_names_the_signing_algorithm() -> None:
    header = create_access_token({"sub": "bee@example.com"}).split(".")[0]
    decoded = json.loads(base64.urlsafe_b64decode(header + "=" * (-len(header) % 4)))

    assert decoded == {"alg": "HS256", "typ": "JWT"}
    assert not hasattr(settings, "algorithm")
