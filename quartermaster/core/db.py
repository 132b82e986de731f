import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from quartermaster.configs import DB_URI, DEBUG
from quartermaster.core.exceptions import QuartermasterError, StorageError

logger = logging.getLogger(__name__)


def make_engine(uri=DB_URI, echo=DEBUG):
    """Builds an engine for `uri`, turning on foreign key enforcement for SQLite."""
    engine_kwargs = {'echo': echo}
    if uri.startswith('sqlite'):
        engine_kwargs['connect_args'] = {'check_same_thread': False}
        # A memory database only lives as long as its one connection
        if ':memory:' in uri or uri in ('sqlite://', 'sqlite+pysqlite://'):
            engine_kwargs['poolclass'] = StaticPool
    else:
        engine_kwargs['client_encoding'] = 'utf8'
    engine = create_engine(uri, **engine_kwargs)

    if engine.dialect.name == 'sqlite':
        @event.listens_for(engine, 'connect')
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute('PRAGMA foreign_keys=ON')
            cursor.close()

    return engine


def make_sessionmaker(bind):
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False)


engine = make_engine()
SessionLocal = make_sessionmaker(engine)


class QuartermasterBase:

    @classmethod
    def get(cls, session, pk):
        return session.get(cls, pk)

    @classmethod
    def get_many(cls, session, offset=None, limit=None):
        return session.query(cls).order_by(cls.id).offset(offset).limit(limit).all()

    @classmethod
    def exists(cls, session, pk):
        return session.query(cls.id).filter(cls.id == pk).first() is not None


Base = declarative_base(cls=QuartermasterBase)


def init(engine_to_init=engine):
    """Creates any missing tables on `engine_to_init`."""
    from quartermaster.core import models  # noqa: F401 registers tables on Base
    try:
        Base.metadata.create_all(bind=engine_to_init)
    except Exception as e:
        logger.warning(f"Database initialization failed: {e}")
        raise


def get_session():
    """FastAPI dependency yielding one session per request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def transaction(session, error=StorageError, action="Database operation", integrity_error=None):
    """Runs the enclosed block as one unit of work on `session`.

    The block's changes are committed together on exit. Any failure rolls
    every change back; domain errors propagate unchanged, storage faults are
    re-raised as `error` (or `integrity_error` for constraint violations).
    """
    try:
        yield session
        session.commit()
    except QuartermasterError:
        session.rollback()
        raise
    except IntegrityError as e:
        session.rollback()
        if integrity_error is not None:
            raise integrity_error() from e
        logger.error(f"{action} rolled back: {e}")
        raise error(f"{action} failed: {str(e)}.") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"{action} rolled back: {e}")
        raise error(f"{action} failed: {str(e)}.") from e
    except Exception:
        session.rollback()
        raise
