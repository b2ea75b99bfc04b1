"""
Mood endpoints.

Daily mood check-in CRUD with date-based upsert.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from fitcoach.db.session import get_db
from fitcoach.schemas.mood import MoodRecordCreate, MoodRecordResponse
from fitcoach.services.mood_service import MoodService

router = APIRouter()


@router.put("/{date}", summary="Create or replace the mood entry of a date.", response_model=MoodRecordResponse)
def upsert_mood(user_id: str, date: datetime.date, data: MoodRecordCreate, response: Response,
                 db: Session = Depends(get_db)):
    """Upsert: creates the entry if it doesn't exist, replaces it if it does.

    The readiness score of the same date is refreshed.
    """
    entry, created = MoodService(db).upsert(user_id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List mood entries.", response_model=list[MoodRecordResponse])
def list_mood(user_id: str,
               start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
               end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
               skip: int = Query(0, ge=0),
               limit: int = Query(100, ge=1, le=500),
               db: Session = Depends(get_db)):
    """With ``start`` and ``end``: entries in range, oldest first.  Otherwise most recent first."""
    service = MoodService(db)
    if start and end:
        return service.get_range(user_id, start, end)
    return service.get_all(user_id, skip, limit)


@router.get("/{date}", summary="Get the mood entry of a date.", response_model=MoodRecordResponse)
def get_mood(user_id: str, date: datetime.date, db: Session = Depends(get_db)):
    return MoodService(db).get_by_date(user_id, date)


@router.delete("/{date}", summary="Delete the mood entry of a date.", status_code=status.HTTP_204_NO_CONTENT)
def delete_mood(user_id: str, date: datetime.date, db: Session = Depends(get_db)):
    MoodService(db).delete_by_date(user_id, date)
