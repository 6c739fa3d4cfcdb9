"""
Name: Credential Store Tests

Responsibilities:
  - Role changes through the real store drive the admin check
  - Email lookups use the stored canonical form
  - The session dependency leaves commits to route handlers
"""

from types import SimpleNamespace

import pytest
import pytest_asyncio

from app.core.authorization import Identity, reauthorize, require_admin
from app.core.exceptions import Forbidden
from app.core.security import TokenClaims
from app.db.session import create_engine, create_session_factory, get_db, init_db
from app.models.user import Role
from app.services.credential_store import CredentialStore

pytestmark = pytest.mark.unit


@pytest_asyncio.fixture
async def session_factory(settings):
    engine = create_engine(settings)
    await init_db(engine, settings)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def store(session_factory):
    async with session_factory() as session:
        yield CredentialStore(session)


def _identity(user) -> Identity:
    return Identity(id=user.id, username=user.username, email=user.email, role=user.role)


@pytest.mark.asyncio
async def test_promote_then_demote_through_store(store):
    user = await store.create("alice", "alice@x.com", "hash")
    assert user.role == Role.USER.value

    await store.set_role(user.id, Role.ADMIN)
    promoted = _identity(await store.get(user.id))
    assert await require_admin(promoted, store) == promoted

    await store.set_role(user.id, Role.USER)
    with pytest.raises(Forbidden):
        await require_admin(promoted, store)


@pytest.mark.asyncio
async def test_reauthorize_reports_live_role_after_demotion(store):
    user = await store.create("alice", "alice@x.com", "hash", role=Role.ADMIN)
    claims = TokenClaims(user_id=user.id, username="alice", email="alice@x.com", role="admin")

    await store.set_role(user.id, Role.USER)
    identity = await reauthorize(claims, store)

    assert identity.role == Role.USER.value
    assert not identity.is_admin


@pytest.mark.asyncio
async def test_email_lookups_use_canonical_form(store):
    user = await store.create("carol", "carol@Example.COM", "hash")

    assert user.email == "carol@example.com"
    assert (await store.find_by_email("carol@EXAMPLE.com")).id == user.id
    assert (await store.find_by_login_identifier("carol@Example.COM")).id == user.id
    assert await store.find_by_login_identifier("Carol") is None


@pytest.mark.asyncio
async def test_session_dependency_does_not_commit(session_factory):
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(session_factory=session_factory)))

    sessions = get_db(request)
    session = await sessions.__anext__()
    await CredentialStore(session).create("ghost", "ghost@x.com", "hash")
    await sessions.aclose()

    async with session_factory() as fresh:
        assert await CredentialStore(fresh).find_by_login_identifier("ghost") is None
