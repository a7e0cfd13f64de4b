"""
Workout session endpoints.

CRUD keyed by the store-assigned session id.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlmodel import Session

from gymlog.db.session import get_db
from gymlog.schemas.workout_session import WorkoutSessionResponse, WorkoutSessionWrite
from gymlog.services.workout_session_service import WorkoutSessionService

router = APIRouter()

# A missing body is validated by the service like one with no fields
_EMPTY_BODY = WorkoutSessionWrite()


@router.get("", summary="List all sessions, newest first.", response_model=list[WorkoutSessionResponse], )
def list_sessions(db: Session = Depends(get_db)):
    return WorkoutSessionService(db).get_all_sessions()


@router.post("", summary="Log a workout session.", response_model=WorkoutSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: Optional[WorkoutSessionWrite] = Body(None), db: Session = Depends(get_db)):
    if data is None:
        data = _EMPTY_BODY
    return WorkoutSessionService(db).create_session(data.date, data.muscle_groups)


@router.get("/{session_id}", summary="Get a single session.", response_model=WorkoutSessionResponse, )
def get_session(session_id: str, db: Session = Depends(get_db)):
    return WorkoutSessionService(db).get_session(session_id)


@router.put("/{session_id}", summary="Replace a session's date and muscle groups.",
            response_model=WorkoutSessionResponse, )
def update_session(session_id: str, data: Optional[WorkoutSessionWrite] = Body(None),
                   db: Session = Depends(get_db)):
    if data is None:
        data = _EMPTY_BODY
    return WorkoutSessionService(db).update_session(session_id, data.date, data.muscle_groups)


@router.delete("/{session_id}", summary="Delete a session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: str, db: Session = Depends(get_db)):
    WorkoutSessionService(db).delete_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
