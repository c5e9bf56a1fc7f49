# app/api/routers/groups.py
"""
Group endpoints: the groups stored by the last regroup cycle.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.domain.models import GroupDTO
from app.infrastructure.db.session import get_db
from app.infrastructure.repositories.group_repo import GroupRepo
from app.services.regroup_service import group_to_dto

router = APIRouter()


@router.get("/", summary="List current groups of a university", response_model=List[GroupDTO])
def list_groups(university: str = Query(default=settings.DEFAULT_UNIVERSITY), db: Session = Depends(get_db)):
    return [group_to_dto(g) for g in GroupRepo(db).list_by_university(university)]


@router.get("/{group_id}", summary="Get group details", response_model=GroupDTO)
def get_group(group_id: int, db: Session = Depends(get_db)):
    g = GroupRepo(db).get(group_id)
    if not g:
        raise HTTPException(status_code=404, detail="group not found")
    return group_to_dto(g)
