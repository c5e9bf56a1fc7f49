# app/services/regroup_service.py
"""
Regroup cycle for one university: load students, run the grouping algorithm,
replace the stored groups and report what happened.
"""
import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict
from typing import List

from app.config.settings import settings
from app.domain import grouping as domain
from app.domain.models import GroupDTO, PlanSummaryDTO, RegroupResultDTO, StudentDTO
from app.infrastructure.models import Student, StudyGroup
from app.infrastructure.repositories.group_repo import GroupRepo
from app.infrastructure.repositories.student_repo import StudentRepo

logger = logging.getLogger(__name__)


def student_to_dto(s: Student) -> StudentDTO:
    return StudentDTO(
        id=s.id,
        name=s.name,
        primary_interest=s.primary_interest,
        secondary_interest=s.secondary_interest,
    )


def group_to_dto(g: StudyGroup) -> GroupDTO:
    return GroupDTO(
        id=g.id,
        interest=g.interest,
        members=[student_to_dto(m.student) for m in g.members],
        created_at=g.created_at,
    )


class RegroupService:
    def __init__(
        self,
        student_repo: StudentRepo = None,
        group_repo: GroupRepo = None,
        trials: int = None,
        workers: int = None,
        seed: int = None,
        shuffle: bool = None,
    ):
        self.student_repo = student_repo or StudentRepo()
        self.group_repo = group_repo or GroupRepo()
        self.trials = trials if trials is not None else settings.REGROUP_TRIALS
        self.workers = workers if workers is not None else settings.REGROUP_WORKERS
        self.seed = seed if seed is not None else settings.REGROUP_SEED
        self.shuffle = shuffle if shuffle is not None else settings.SHUFFLE_BEFORE_BUCKETING

    def _run(self, students: List[domain.Student]) -> domain.Plan:
        rng = random.Random(self.seed)
        if self.workers > 0:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                return domain.regroup(students, self.trials, rng=rng, executor=pool, shuffle=self.shuffle)
        return domain.regroup(students, self.trials, rng=rng, shuffle=self.shuffle)

    def regroup_university(self, university: str) -> RegroupResultDTO:
        if not university or not university.strip():
            raise ValueError("university is required")

        students = [s.to_domain() for s in self.student_repo.list_by_university(university)]
        plan = self._run(students)
        rows = self.group_repo.replace_for_university(university, plan)

        summary = domain.summarize_plan(students, plan)
        logger.info(
            "Stored %d groups for %s, %d of %d students ungrouped",
            summary.total_groups, university, summary.ungrouped_students, summary.total_students,
        )
        return RegroupResultDTO(
            university=university,
            summary=PlanSummaryDTO(**asdict(summary)),
            groups=[group_to_dto(g) for g in rows],
        )

    def list_groups(self, university: str) -> List[GroupDTO]:
        return [group_to_dto(g) for g in self.group_repo.list_by_university(university)]
