# db.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from config import DB_URL
from models import Base

logger = logging.getLogger(__name__)

engine = create_engine(DB_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db():
    Base.metadata.create_all(engine)


def get_session(db_url):
    """Standalone session on its own engine, schema created on the way in."""
    other_engine = create_engine(db_url, echo=False)
    Base.metadata.create_all(other_engine)
    return sessionmaker(bind=other_engine, autoflush=False)()


# record store: get-all / put / delete per collection (one model per collection)

def get_all(session, model):
    return session.query(model).order_by(model.id).all()


def put(session, record):
    record = session.merge(record) if record.id is not None else record
    session.add(record)
    session.commit()
    return record


def delete(session, model, record_id):
    record = session.get(model, record_id)
    if record is None:
        raise LookupError(f"{model.__tablename__} record {record_id} not found")
    session.delete(record)
    session.commit()
    logger.info("deleted %s record %s", model.__tablename__, record_id)
