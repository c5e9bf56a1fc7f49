# app/api/routers/admin.py
"""
Admin utilities: init database, load the sample population.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.infrastructure import models  # noqa: F401 registers the tables
from app.infrastructure.db.session import Base, engine, get_db
from app.infrastructure.repositories.student_repo import StudentRepo
from app.simulation.sample_data import sample_rows

router = APIRouter()

@router.post("/init_db", summary="Create all tables in DB")
def init_db():
    """
    Create all tables in the database.

    WARNING:
        This does not drop existing tables.
        It only ensures missing tables are created.
    """
    Base.metadata.create_all(bind=engine)
    return {"status": "ok", "message": "Database initialized"}


@router.post("/seed", summary="Load the sample students into a university")
def seed(university: str = Query(default=settings.DEFAULT_UNIVERSITY), db: Session = Depends(get_db)):
    created = StudentRepo(db).bulk_create(university, sample_rows())
    return {"status": "ok", "university": university, "created": created}
