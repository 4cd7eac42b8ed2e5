import logging
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Handle explicite sur le moteur SQLAlchemy et sa fabrique de sessions.

    Construit au démarrage de l'application (lifespan), fermé à l'arrêt.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> "Database":
        connect_args = (
            {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        )
        self.engine = create_engine(
            self.url, echo=self.echo, pool_pre_ping=True, connect_args=connect_args
        )
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False
        )
        logger.info(f"Database engine created for {self.engine.url.render_as_string()}")
        return self

    def create_all(self) -> None:
        if self.engine is None:
            raise RuntimeError("Database is not connected")
        import app.models  # noqa: F401  registers tables on Base.metadata

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        return self._session_factory()

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database engine disposed")
        self.engine = None
        self._session_factory = None


def get_db(request: Request) -> Generator[Session, None, None]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
