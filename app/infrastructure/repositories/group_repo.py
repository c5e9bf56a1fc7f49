from app.infrastructure.db.session import SessionLocal
from app.infrastructure.models import StudyGroup, StudyGroupMember
from app.domain.grouping import Group
from typing import Optional, List

class GroupRepo:
    def __init__(self, db=None):
        self.db = db or SessionLocal()

    def replace_for_university(self, university: str, groups: List[Group]) -> List[StudyGroup]:
        """
        Drop the university's previous groups and store the new plan in one commit.
        Only students loaded from the database (with a student_id) are stored as members.
        """
        for old in self.list_by_university(university):
            self.db.delete(old)

        created = []
        for g in groups:
            row = StudyGroup(university=university, interest=g.interest)
            row.members = [
                StudyGroupMember(student_id=s.student_id, position=i)
                for i, s in enumerate(g.students)
                if s.student_id is not None
            ]
            self.db.add(row)
            created.append(row)

        self.db.commit()
        for row in created:
            self.db.refresh(row)
        return created

    def get(self, group_id: int) -> Optional[StudyGroup]:
        return self.db.query(StudyGroup).filter(StudyGroup.id == group_id).first()

    def list_by_university(self, university: str) -> List[StudyGroup]:
        return (
            self.db.query(StudyGroup)
            .filter(StudyGroup.university == university)
            .order_by(StudyGroup.id)
            .all()
        )
