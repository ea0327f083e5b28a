import json
import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, Column, Integer, String, Text, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from diseasematch import config
from diseasematch.seed_data import DISEASES

logger = logging.getLogger(__name__)

DATABASE_URL = config.DATABASE_URL


def _engine_kwargs(url):
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory sqlite: one shared connection so every thread sees the same tables
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


# --- CATALOG ---
class Disease(Base):
    __tablename__ = "diseases"
    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    # JSON encoded lists of strings
    symptoms = Column(Text, nullable=False, default="[]")
    causes = Column(Text, nullable=True)
    precautions = Column(Text, nullable=True)
    medicines = Column(Text, nullable=True)
    severity = Column(String, default="medium")
    category = Column(String, nullable=True)


# --- PREDICTION LOG ---
class DiseaseQuery(Base):
    __tablename__ = "disease_queries"
    id = Column(Integer, primary_key=True)
    user_id = Column(String, index=True)
    symptoms = Column(Text)
    predictions = Column(Text)
    confidence = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


def upsert_disease(db, data):
    """Insert or update a catalog row keyed on the disease name."""
    row = db.query(Disease).filter(Disease.name == data["name"]).first()
    if row is None:
        row = Disease(name=data["name"])
        db.add(row)
    row.description = data.get("description", "")
    row.symptoms = json.dumps(list(data["symptoms"]))
    row.causes = json.dumps(list(data.get("causes", [])))
    row.precautions = json.dumps(list(data.get("precautions", [])))
    row.medicines = json.dumps(list(data.get("medicines", [])))
    row.severity = data.get("severity", "medium")
    row.category = data.get("category")
    return row


def init_db(seed=True):
    Base.metadata.create_all(bind=engine)
    if not seed:
        return
    db = SessionLocal()
    try:
        for data in DISEASES:
            upsert_disease(db, data)
        db.commit()
        logger.info("Catalog seeded with %d diseases", len(DISEASES))
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    init_db()
