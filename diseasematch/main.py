import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, Depends, BackgroundTasks, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from diseasematch import config, database
from diseasematch.catalog import SqlCatalog, record_to_dict
from diseasematch.database import Disease, SessionLocal
from diseasematch.errors import InvalidInput, CatalogUnavailable
from diseasematch.predictor import DiseasePredictor, validate_symptoms
from diseasematch.query_log import QueryLogger, load_history

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="diseasematch")
database.init_db()
query_logger = QueryLogger(SessionLocal)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_catalog(db: Session = Depends(get_db)):
    return SqlCatalog(db)


def get_query_logger():
    return query_logger


# --- DTOs ---
class PredictRequest(BaseModel):
    user_id: str = "anonymous"
    symptoms: Optional[List[str]] = None


# --- ERRORS ---
@app.exception_handler(InvalidInput)
def invalid_input(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(CatalogUnavailable)
def catalog_unavailable(request: Request, exc: CatalogUnavailable):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# --- ROUTES ---
@app.get("/health")
def health(db: Session = Depends(get_db)):
    return {"status": "ok", "diseases": db.query(Disease).count()}


@app.post("/predict")
def predict(req: PredictRequest, background: BackgroundTasks,
            catalog=Depends(get_catalog), qlog: QueryLogger = Depends(get_query_logger)):
    symptoms = validate_symptoms(req.symptoms)
    results = DiseasePredictor(catalog).predict(symptoms)
    predictions = [r.to_dict() for r in results]
    # written after the response is prepared; failures are only logged
    background.add_task(qlog.record, req.user_id, symptoms, predictions)
    return {
        "success": True,
        "symptoms": symptoms,
        "predictions": predictions,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/diseases")
def diseases(catalog=Depends(get_catalog)):
    return [record_to_dict(r) for r in catalog.fetch_all()]


@app.get("/predictions/history")
def history(user_id: str, limit: int = config.HISTORY_LIMIT, db: Session = Depends(get_db)):
    return load_history(db, user_id, limit)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("diseasematch.main:app", host="0.0.0.0", port=8000)
