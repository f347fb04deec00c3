import logging

from ..config import get_settings
from ..models import Base, User
from .database import SessionLocal, engine

logger = logging.getLogger("mindhaven.database")


def init_db(bind=None, session_factory=None):
    # Create all tables
    Base.metadata.create_all(bind=bind or engine)

    settings = get_settings()
    if not settings.DEFAULT_ADMIN_EMAIL or not settings.DEFAULT_ADMIN_PASSWORD:
        logger.info("Database initialized (no default admin configured)")
        return

    # Create default admin
    from ..utils.auth import get_password_hash
    db = (session_factory or SessionLocal)()
    try:
        admin = db.query(User).filter(User.email == settings.DEFAULT_ADMIN_EMAIL).first()
        if not admin:
            db.add(User(
                email=settings.DEFAULT_ADMIN_EMAIL,
                hashed_password=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
                name="Administrator",
                display_name="Admin",
                role="admin",
            ))
            db.commit()
            logger.info("Database initialized with default admin %s", settings.DEFAULT_ADMIN_EMAIL)
    except Exception as e:
        db.rollback()
        logger.error("Error initializing database: %s", e)
    finally:
        db.close()
