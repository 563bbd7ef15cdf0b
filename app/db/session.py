from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config.settings import get_settings

# Database setup - sqlite by default, any SQLAlchemy URL works
DATABASE_URL = get_settings().DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Create engine
engine = create_engine(DATABASE_URL, connect_args=connect_args)

# Create session
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
