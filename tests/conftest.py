from __future__ import annotations

import sqlite3
from datetime import date, time
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from room_escape_api.app.api.deps import get_clock
from room_escape_api.app.core.config import settings
from room_escape_api.app.core.db import get_connection, init_db
from room_escape_api.app.core.security import hash_password
from room_escape_api.app.main import app
from room_escape_api.app.models import ROLE_ADMIN, Member, Theme, Time
from room_escape_api.app.repositories import (
    MemberRepository,
    ReservationRepository,
    ThemeRepository,
    TimeRepository,
)
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.services.reservation_service import ReservationService

TODAY = date(2030, 1, 15)
PASSWORD = "super-secret-password"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "room_escape.sqlite3")
    init_db(path)
    return path


@pytest.fixture()
def conn(db_path: str) -> Iterator[sqlite3.Connection]:
    connection = get_connection(db_path)
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture()
def member(conn: sqlite3.Connection) -> Member:
    return MemberRepository(conn).save(
        Member(id=None, name="Bumblebee", email="bee@example.com", password=hash_password(PASSWORD))
    )


@pytest.fixture()
def other_member(conn: sqlite3.Connection) -> Member:
    return MemberRepository(conn).save(
        Member(id=None, name="Optimus", email="prime@example.com", password=hash_password(PASSWORD))
    )


@pytest.fixture()
def member_profile(member: Member) -> MemberProfile:
    return MemberProfile.from_member(member)


@pytest.fixture()
def noon(conn: sqlite3.Connection) -> Time:
    return TimeRepository(conn).save(Time(id=None, start_at=time(12, 0)))


@pytest.fixture()
def evening(conn: sqlite3.Connection) -> Time:
    return TimeRepository(conn).save(Time(id=None, start_at=time(18, 30)))


@pytest.fixture()
def theme(conn: sqlite3.Connection) -> Theme:
    return ThemeRepository(conn).save(
        Theme(id=None, name="Harry Potter", description="Harry Potter and Dobby", thumbnail="thumbnail.jpg")
    )


@pytest.fixture()
def other_theme(conn: sqlite3.Connection) -> Theme:
    return ThemeRepository(conn).save(Theme(id=None, name="Sherlock", description="Baker Street"))


@pytest.fixture()
def reservation_service(conn: sqlite3.Connection) -> ReservationService:
    return ReservationService(
        ReservationRepository(conn),
        TimeRepository(conn),
        ThemeRepository(conn),
        MemberRepository(conn),
        clock=lambda: TODAY,
    )


@pytest.fixture()
def client(db_path: str, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setattr(settings, "database_url", db_path)
    app.dependency_overrides[get_clock] = lambda: (lambda: TODAY)
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def signup_and_login(client: TestClient, email: str, name: str = "Member") -> dict[str, str]:
    response = client.post("/api/v1/members/", json={"name": name, "email": email, "password": PASSWORD})
    assert response.status_code == 201, response.text
    login = client.post("/api/v1/login", json={"email": email, "password": PASSWORD})
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['access_token']}"}


def make_admin(db_path: str, email: str) -> None:
    connection = get_connection(db_path)
    try:
        connection.execute("UPDATE members SET role = ? WHERE email = ?", (ROLE_ADMIN, email))
        connection.commit()
    finally:
        connection.close()


@pytest.fixture()
def member_headers(client: TestClient) -> dict[str, str]:
    return signup_and_login(client, "bee@example.com", "Bumblebee")


@pytest.fixture()
def admin_headers(client: TestClient, db_path: str) -> dict[str, str]:
    headers = signup_and_login(client, "admin@example.com", "Admin")
    make_admin(db_path, "admin@example.com")
    return headers
