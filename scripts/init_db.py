# scripts/init_db.py
"""
Script to initialize database tables. Run from project root:
    python scripts/init_db.py
    python scripts/init_db.py --seed dev_uni
"""
import argparse

from app.infrastructure import models  # noqa: F401 registers the tables
from app.infrastructure.db.session import Base, engine, SessionLocal
from app.infrastructure.repositories.student_repo import StudentRepo
from app.simulation.sample_data import sample_rows

def init(seed_university: str = None):
    Base.metadata.create_all(bind=engine)
    print("DB initialized")
    if seed_university:
        db = SessionLocal()
        try:
            created = StudentRepo(db).bulk_create(seed_university, sample_rows())
        finally:
            db.close()
        print(f"Seeded {created} students into {seed_university}")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and optionally load the sample students.")
    parser.add_argument("--seed", metavar="UNIVERSITY", default=None)
    init(parser.parse_args().seed)
