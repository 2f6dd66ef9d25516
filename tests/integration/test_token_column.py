"""Integration tests for storing tokens with SQLAlchemy."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import Integer, String, select
from sqlalchemy.dialects import sqlite
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from securetoken import InvalidScalarTypeError, Token
from securetoken.infrastructure.persistence import TokenColumn


class Base(DeclarativeBase):
    pass


class SessionModel(Base):
    __tablename__ = "sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    token: Mapped[Token] = mapped_column(TokenColumn(32), nullable=False, unique=True)
    previous_token: Mapped[Token | None] = mapped_column(TokenColumn(32), nullable=True)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.mark.asyncio
async def test_store_and_load_token(db_session):
    """Test that a token survives a database round trip byte for byte."""
    token = Token.generate(32)
    db_session.add(SessionModel(id=1, user_id="usr_1", token=token))
    await db_session.commit()
    db_session.expunge_all()

    result = await db_session.execute(select(SessionModel).where(SessionModel.id == 1))
    loaded = result.scalar_one()

    assert isinstance(loaded.token, Token)
    assert loaded.token == token
    assert loaded.previous_token is None


@pytest.mark.asyncio
async def test_lookup_by_token(db_session):
    tokens = [Token.generate(32) for _ in range(3)]
    db_session.add_all(
        [SessionModel(id=i, user_id=f"usr_{i}", token=t) for i, t in enumerate(tokens)]
    )
    await db_session.commit()

    result = await db_session.execute(select(SessionModel.user_id).where(SessionModel.token == tokens[1]))
    assert result.scalar_one() == "usr_1"


@pytest.mark.asyncio
async def test_rotate_token(db_session):
    old_token = Token.generate(32)
    session = SessionModel(id=1, user_id="usr_1", token=old_token)
    db_session.add(session)
    await db_session.commit()

    new_token = Token.generate(32)
    session.previous_token = session.token
    session.token = new_token
    await db_session.commit()
    db_session.expunge_all()

    result = await db_session.execute(select(SessionModel).where(SessionModel.id == 1))
    loaded = result.scalar_one()
    assert loaded.token == new_token
    assert loaded.previous_token == old_token


def test_bind_param_emits_raw_bytes():
    column_type = TokenColumn()
    token = Token(b"\x01\x02")

    assert column_type.process_bind_param(token, sqlite.dialect()) == b"\x01\x02"
    assert column_type.process_bind_param(None, sqlite.dialect()) is None


def test_bind_param_rejects_non_tokens():
    with pytest.raises(TypeError, match="expected Token"):
        TokenColumn().process_bind_param(b"\x01\x02", sqlite.dialect())


def test_result_value_scans_bytes():
    column_type = TokenColumn()

    assert column_type.process_result_value(memoryview(b"\x01"), sqlite.dialect()) == Token(b"\x01")
    assert column_type.process_result_value(None, sqlite.dialect()) is None


@pytest.mark.parametrize("value", ["AQI", 7])
def test_result_value_rejects_non_bytes(value):
    with pytest.raises(InvalidScalarTypeError):
        TokenColumn().process_result_value(value, sqlite.dialect())


def test_python_type():
    assert TokenColumn().python_type is Token
