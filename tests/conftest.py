import pytest
from quartermaster.core.db import Base, make_engine, make_sessionmaker
from quartermaster.core import models  # noqa: F401 registers tables on Base
from quartermaster.core.equipment import add_equipment
from quartermaster.core.borrowers import add_borrower


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", echo=False)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = make_sessionmaker(engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def borrower(db_session):
    return add_borrower(db_session, "Lovelace", "Ada")


@pytest.fixture
def rifle(db_session):
    return add_equipment(db_session, "Rifle", "Long", 100, 2)
