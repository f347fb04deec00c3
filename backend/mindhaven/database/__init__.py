from .database import SessionLocal, engine, get_db
from .init_db import init_db

__all__ = ['SessionLocal', 'engine', 'get_db', 'init_db']
