# app/api/routers/students.py
"""
Student endpoints: register students, list them, look one up.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.domain.models import StudentDTO
from app.infrastructure.db.session import get_db
from app.infrastructure.repositories.student_repo import StudentRepo
from app.services.regroup_service import student_to_dto

router = APIRouter()


class StudentCreateReq(BaseModel):
    university: str = settings.DEFAULT_UNIVERSITY
    name: str
    primary_interest: str
    secondary_interest: Optional[str] = None  # defaults to the primary interest


@router.post("/", summary="Create a student", response_model=StudentDTO)
def create_student(req: StudentCreateReq, db: Session = Depends(get_db)):
    if not req.university.strip() or not req.name.strip() or not req.primary_interest.strip():
        raise HTTPException(status_code=400, detail="university, name and primary_interest are required")
    if req.secondary_interest is not None and not req.secondary_interest.strip():
        raise HTTPException(status_code=400, detail="secondary_interest can't be blank")
    s = StudentRepo(db).create(req.university, req.name, req.primary_interest, req.secondary_interest)
    return student_to_dto(s)


@router.get("/", summary="List students of a university", response_model=List[StudentDTO])
def list_students(university: str = Query(default=settings.DEFAULT_UNIVERSITY), db: Session = Depends(get_db)):
    return [student_to_dto(s) for s in StudentRepo(db).list_by_university(university)]


@router.get("/{student_id}", summary="Get a student", response_model=StudentDTO)
def get_student(student_id: int, db: Session = Depends(get_db)):
    s = StudentRepo(db).get(student_id)
    if not s:
        raise HTTPException(status_code=404, detail="student not found")
    return student_to_dto(s)
