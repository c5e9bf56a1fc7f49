from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class StudentDTO(BaseModel):
    id: Optional[int] = None
    name: str
    primary_interest: str
    secondary_interest: str

class GroupDTO(BaseModel):
    id: Optional[int] = None
    interest: str
    members: List[StudentDTO] = Field(default_factory=list)
    created_at: Optional[datetime] = None

class PlanSummaryDTO(BaseModel):
    total_students: int
    total_interests: int
    total_groups: int
    grouped_students: int
    ungrouped_students: int

class RegroupResultDTO(BaseModel):
    university: str
    summary: PlanSummaryDTO
    groups: List[GroupDTO] = Field(default_factory=list)
