"""
Persistence of completed predictions.

QueryLogger.record() runs after the response is prepared. It never raises, so a
failed write cannot turn a successful prediction into an error.
"""

import json
import logging
from typing import List, Sequence

from sqlalchemy.exc import SQLAlchemyError

from diseasematch import config
from diseasematch.database import DiseaseQuery
from diseasematch.errors import LogWriteFailed

logger = logging.getLogger(__name__)


def _as_dict(prediction):
    return prediction.to_dict() if hasattr(prediction, "to_dict") else dict(prediction)


class QueryLogger:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def record(self, user_id, symptoms: Sequence[str], predictions) -> None:
        try:
            self._write(user_id, symptoms, predictions)
        except LogWriteFailed as exc:
            logger.error("Prediction query for user %s was not recorded: %s", user_id, exc)
        except Exception:
            logger.exception("Unexpected error recording prediction query for user %s", user_id)

    def _write(self, user_id, symptoms, predictions):
        try:
            payload = [_as_dict(p) for p in predictions]
            entry = DiseaseQuery(
                user_id=str(user_id),
                symptoms=json.dumps(list(symptoms)),
                predictions=json.dumps(payload),
                confidence=payload[0]["confidence"] if payload else 0,
            )
        except (TypeError, ValueError, KeyError) as exc:
            raise LogWriteFailed(f"could not serialize predictions: {exc}") from exc

        db = self.session_factory()
        try:
            db.add(entry)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise LogWriteFailed(str(exc)) from exc
        finally:
            db.close()


def load_history(db, user_id, limit: int = config.HISTORY_LIMIT) -> List[dict]:
    """Stored predictions for one user, newest first."""
    rows = (
        db.query(DiseaseQuery)
        .filter(DiseaseQuery.user_id == str(user_id))
        .order_by(DiseaseQuery.created_at.desc(), DiseaseQuery.id.desc())
        .limit(limit)
        .all()
    )
    return [{
        "id": r.id,
        "user_id": r.user_id,
        "symptoms": json.loads(r.symptoms or "[]"),
        "predictions": json.loads(r.predictions or "[]"),
        "confidence": r.confidence or 0,
        "timestamp": r.created_at.isoformat() if r.created_at else None,
    } for r in rows]
