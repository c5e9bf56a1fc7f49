# app/api/routers/regroup.py
"""
Regroup endpoint: run one grouping cycle for a university.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.domain.models import RegroupResultDTO
from app.infrastructure.db.session import get_db
from app.infrastructure.repositories.group_repo import GroupRepo
from app.infrastructure.repositories.student_repo import StudentRepo
from app.services.regroup_service import RegroupService

router = APIRouter()


@router.get("/regroup", summary="Regroup all students of a university", response_model=RegroupResultDTO)
def regroup(university: str = Query(default=settings.DEFAULT_UNIVERSITY), db: Session = Depends(get_db)):
    service = RegroupService(StudentRepo(db), GroupRepo(db))
    try:
        return service.regroup_university(university)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
