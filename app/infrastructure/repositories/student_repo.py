from app.infrastructure.db.session import SessionLocal
from app.infrastructure.models import Student
from typing import Iterable, Optional, List, Tuple

class StudentRepo:
    def __init__(self, db=None):
        self.db = db or SessionLocal()

    def create(self, university: str, name: str, primary_interest: str, secondary_interest: str = None) -> Student:
        s = Student(
            university=university,
            name=name,
            primary_interest=primary_interest,
            secondary_interest=secondary_interest or primary_interest,
        )
        self.db.add(s)
        self.db.commit()
        self.db.refresh(s)
        return s

    def bulk_create(self, university: str, rows: Iterable[Tuple[str, str, str]]) -> int:
        """rows: (name, primary_interest, secondary_interest)"""
        students = [
            Student(university=university, name=name, primary_interest=primary, secondary_interest=secondary)
            for name, primary, secondary in rows
        ]
        self.db.add_all(students)
        self.db.commit()
        return len(students)

    def get(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def list_by_university(self, university: str) -> List[Student]:
        return (
            self.db.query(Student)
            .filter(Student.university == university)
            .order_by(Student.id)
            .all()
        )
