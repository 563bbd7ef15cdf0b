import logging

from sqlalchemy.engine import Engine

from app.db.base import Base
import app.models.form  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

def init_db(engine: Engine) -> None:
    """Create the form tables if they don't exist"""
    Base.metadata.create_all(bind=engine)
    logger.info("Form tables ready")
