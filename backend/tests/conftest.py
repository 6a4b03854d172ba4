from datetime import date, datetime, time
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest
from sqlalchemy.orm import Session, sessionmaker

from fieldbook.auth import TokenService, get_password_hash
from fieldbook.core.config import Settings
from fieldbook.database import Base, build_engine, create_session_factory
from fieldbook.main import create_app

# Import models so Base.metadata is populated for create_all.
import fieldbook.models  # noqa: F401
from fieldbook.models import Booking, Field, User

# Pinned "now" for every booking created through the API in tests.
FIXED_NOW = datetime(2025, 6, 1, 9, 0)

TEST_JWT_SECRET = "test-secret-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_port=8080,
        jwt_secret=TEST_JWT_SECRET,
        postgres_host="localhost",
        postgres_port=5432,
        postgres_dbname="fieldbook_test",
        postgres_username="fieldbook",
        postgres_password="fieldbook",
        database_url_override="sqlite://",
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings.database_url)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings, session_factory) -> FastAPI:
    app = create_app(settings, session_factory)
    app.state.clock = lambda: FIXED_NOW
    return app


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def token_for(token_service) -> Callable[..., str]:
    def _token_for(role: str = "user", user_id: int = 1, email: Optional[str] = None) -> str:
        return token_service.create_access_token(
            user_id=user_id,
            email=email or f"{role}{user_id}@example.com",
            role=role,
        )

    return _token_for


@pytest.fixture
def auth_headers(token_for) -> Callable[..., dict]:
    def _auth_headers(role: str = "user", user_id: int = 1) -> dict:
        return {"Authorization": f"Bearer {token_for(role=role, user_id=user_id)}"}

    return _auth_headers


@pytest.fixture
def make_user(db) -> Callable[..., User]:
    def _make_user(
        email: str = "player@example.com",
        password: str = "secret123",
        role: str = "user",
        username: str = "player",
    ) -> User:
        user = User(
            username=username,
            email=email,
            hashed_password=get_password_hash(password),
            role=role,
        )
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def make_field(db) -> Callable[..., Field]:
    def _make_field(
        name: str = "Lapangan A",
        price_per_hour: int = 100,
        location: str = "Jakarta",
    ) -> Field:
        field = Field(name=name, price_per_hour=price_per_hour, location=location)
        db.add(field)
        db.commit()
        return field

    return _make_field


@pytest.fixture
def make_booking(db) -> Callable[..., Booking]:
    def _make_booking(
        field: Field,
        user_id: int = 1,
        booking_date: date = date(2025, 6, 2),
        start_time: time = time(10, 0),
        end_time: time = time(12, 0),
        status: str = "pending",
        total_price: int = 200,
    ) -> Booking:
        booking = Booking(
            user_id=user_id,
            field_id=field.id,
            booking_date=booking_date,
            start_time=start_time,
            end_time=end_time,
            total_price=total_price,
            status=status,
        )
        db.add(booking)
        db.commit()
        return booking

    return _make_booking
