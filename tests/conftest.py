from __future__ import annotations

import os
from decimal import Decimal

# must be set before storefront.utils.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-with-enough-bytes-for-hs256"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"

import pytest  # noqa: E402
from argon2 import PasswordHasher as Argon2Hasher  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

import storefront.data.models  # noqa: E402,F401
from storefront.celery_worker import celery_app  # noqa: E402
from storefront.data.database import Base, get_db, make_engine  # noqa: E402
from storefront.data.models.product import ProductModel  # noqa: E402
from storefront.data.unit_of_work import UnitOfWork  # noqa: E402
from storefront.security.authenticator import Authenticator  # noqa: E402
from storefront.security.passwords import PasswordHasher  # noqa: E402
from storefront.security.tokens import TokenIssuer  # noqa: E402
from storefront.services.account_service import AccountService  # noqa: E402
from storefront.services.cart_service import CartService  # noqa: E402

celery_app.conf.task_always_eager = True


class RecordingNotifications:
    def __init__(self):
        self.sent = []

    def send_welcome_notification(self, user_id, email):
        self.sent.append((user_id, email))


@pytest.fixture()
def engine(tmp_path):
    """Temporary SQLite file with a fresh schema for each test."""
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def uow_factory(db):
    return lambda: UnitOfWork(db)


@pytest.fixture()
def hasher():
    # cheap parameters, the tests only care about behaviour
    return PasswordHasher(Argon2Hasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture()
def token_issuer():
    return TokenIssuer(secret="test-secret-with-enough-bytes-for-hs256", ttl_seconds=300)


@pytest.fixture()
def notifications():
    return RecordingNotifications()


@pytest.fixture()
def account_service(uow_factory, hasher, token_issuer, notifications):
    return AccountService(
        uow_factory=uow_factory,
        hasher=hasher,
        authenticator=Authenticator(uow_factory, hasher),
        token_issuer=token_issuer,
        notification_service=notifications,
    )


@pytest.fixture()
def cart_service(uow_factory):
    return CartService(uow_factory=uow_factory)


@pytest.fixture()
def product(db):
    p = ProductModel(id=1, name="Keyboard", price=Decimal("199.99"))
    db.add(p)
    db.commit()
    return p


@pytest.fixture()
def client(session_factory):
    from storefront.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
