"""
Readiness endpoints — daily score, history and window statistics.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from fitcoach.api.dependencies import result_or_raise
from fitcoach.db.session import get_db
from fitcoach.schemas.readiness import ReadinessScore, ReadinessStats
from fitcoach.services.readiness_service import ReadinessService

router = APIRouter()


@router.get("/readiness", summary="List cached readiness scores, most recent first.",
            response_model=list[ReadinessScore])
def list_readiness_scores(user_id: str,
                          start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                          end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                          limit: int = Query(30, ge=1, le=366),
                          offset: int = Query(0, ge=0),
                          db: Session = Depends(get_db)):
    return result_or_raise(ReadinessService(db).history(user_id, start, end, limit, offset))


@router.post("/readiness/{date}", summary="Recompute the readiness score of a date.",
             response_model=ReadinessScore)
def compute_readiness_score(user_id: str, date: datetime.date, db: Session = Depends(get_db)):
    """Requires a sleep and a mood entry for ``date``; 404 otherwise."""
    return result_or_raise(ReadinessService(db).compute(user_id, date))


@router.get("/readiness/{date}", summary="Get the readiness score of a date (computed on first access).",
            response_model=ReadinessScore)
def get_readiness_score(user_id: str, date: datetime.date, db: Session = Depends(get_db)):
    return result_or_raise(ReadinessService(db).get(user_id, date))


@router.get("/readiness-stats", summary="Readiness averages and trends over a trailing window.",
            response_model=ReadinessStats)
def get_readiness_stats(user_id: str,
                        days: Optional[int] = Query(None, ge=1, le=365, description="Window length (days)"),
                        as_of: Optional[datetime.date] = Query(None, description="Window end (defaults to today)"),
                        db: Session = Depends(get_db)):
    return result_or_raise(ReadinessService(db).stats(user_id, days, as_of))
