"""Shared test fixtures for the SignDesk test suite."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from signdesk.core.db import Base
from signdesk.db import models
from signdesk.domains.audit.entities import AuditUser, RequestMetadata
from signdesk.domains.documents.entities import DocumentStatus, DocumentVisibility
from signdesk.domains.teams.entities import TeamMemberRole


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """File-backed SQLite engine with the full schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'signdesk.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory: sessionmaker) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@dataclass
class World:
    """Seeded organisations, teams and users shared by database tests."""

    team_id: int
    cfr21_team_id: int
    owner_id: int
    admin_id: int
    manager_id: int
    member_id: int
    outsider_id: int


@pytest_asyncio.fixture
async def world(session_factory: sessionmaker) -> World:
    """Create a team without cfr21, a team with cfr21 and one user per role."""
    async with session_factory() as session:
        plain_org = models.Organisation(name="Plain", claim_flags={"cfr21": False})
        cfr21_org = models.Organisation(name="Regulated", claim_flags={"cfr21": True})
        session.add_all([plain_org, cfr21_org])
        await session.flush()

        team = models.Team(name="Team", organisation_id=plain_org.id)
        cfr21_team = models.Team(name="Regulated team", organisation_id=cfr21_org.id)
        session.add_all([team, cfr21_team])

        users = {
            name: models.User(email=f"{name}@example.com", name=name.title())
            for name in ("owner", "admin", "manager", "member", "outsider")
        }
        session.add_all(users.values())
        await session.flush()

        roles = {
            "owner": TeamMemberRole.MEMBER,
            "admin": TeamMemberRole.ADMIN,
            "manager": TeamMemberRole.MANAGER,
            "member": TeamMemberRole.MEMBER,
        }
        for team_row in (team, cfr21_team):
            for name, role in roles.items():
                session.add(models.TeamMember(team_id=team_row.id, user_id=users[name].id, role=role))

        await session.commit()

        return World(
            team_id=team.id,
            cfr21_team_id=cfr21_team.id,
            owner_id=users["owner"].id,
            admin_id=users["admin"].id,
            manager_id=users["manager"].id,
            member_id=users["member"].id,
            outsider_id=users["outsider"].id,
        )


@pytest.fixture
def make_document(
    session_factory: sessionmaker, world: World
) -> Callable[..., Awaitable[int]]:
    """Factory fixture that stores a document and returns its id.

    Usage:
        async def test_something(make_document):
            document_id = await make_document(status=DocumentStatus.PENDING)
    """

    async def _make_document(**overrides: Any) -> int:
        values: dict[str, Any] = {
            "title": "Contract",
            "external_id": "ext-1",
            "visibility": DocumentVisibility.EVERYONE,
            "status": DocumentStatus.DRAFT,
            "auth_options": None,
            "use_legacy_field_insertion": False,
            "user_id": world.owner_id,
            "team_id": world.team_id,
        }
        values.update(overrides)

        async with session_factory() as session:
            document = models.Document(**values)
            session.add(document)
            await session.commit()
            return document.id

    return _make_document


@pytest.fixture
def request_metadata() -> RequestMetadata:
    return RequestMetadata(
        ip_address="10.0.0.1",
        user_agent="pytest-agent",
        audit_user=AuditUser(id=1, email="owner@example.com", name="Owner"),
    )
