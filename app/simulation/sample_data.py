# app/simulation/sample_data.py
"""
Sample student populations for local runs and tests.
"""
import random
from typing import List, Optional, Sequence, Tuple

from faker import Faker

from app.domain.grouping import Student

# (primary_interest, secondary_interest) for the dev_uni test population
SAMPLE_INTERESTS: List[Tuple[str, str]] = [
    ("1", "2"), ("1", "2"), ("1", "2"), ("1", "2"), ("1", "2"), ("1", "3"),
    ("1", "12"), ("1", "3"), ("1", "4"), ("1", "4"), ("1", "5"), ("1", "5"),
    ("1", "11"), ("1", "6"), ("1", "13"), ("1", "8"), ("1", "10"), ("2", "2"),
    ("2", "2"), ("3", "2"), ("4", "2"), ("5", "2"), ("2", "3"), ("3", "3"),
    ("5", "3"), ("7", "11"), ("6", "4"), ("8", "5"), ("9", "5"), ("10", "6"),
    ("3", "6"), ("5", "14"), ("7", "8"), ("9", "10"), ("2", "2"), ("4", "2"),
    ("6", "2"), ("8", "2"), ("10", "2"), ("3", "3"), ("4", "3"), ("6", "3"),
    ("7", "4"), ("8", "4"), ("1", "5"), ("2", "5"), ("4", "6"), ("5", "6"),
    ("9", "7"), ("10", "8"), ("3", "10"), ("5", "2"), ("6", "2"), ("6", "2"),
    ("13", "2"), ("14", "15"), ("2", "16"), ("2", "16"), ("1", "16"), ("2", "16"),
    ("11", "4"), ("3", "5"), ("12", "5"), ("1", "6"), ("2", "6"), ("3", "7"),
    ("5", "8"), ("5", "10"), ("12", "2"), ("6", "2"), ("1", "2"), ("2", "2"),
    ("2", "2"), ("12", "3"), ("4", "3"), ("2", "3"), ("12", "4"), ("8", "4"),
    ("1", "5"), ("2", "5"), ("3", "6"), ("4", "6"), ("5", "7"), ("6", "8"),
    ("7", "10"),
]


def sample_rows() -> List[Tuple[str, str, str]]:
    """(name, primary, secondary) rows for the sample population."""
    return [(f"Student {i + 1}", primary, secondary) for i, (primary, secondary) in enumerate(SAMPLE_INTERESTS)]


def sample_students() -> List[Student]:
    return [Student(name, primary, secondary) for name, primary, secondary in sample_rows()]


def generate_students(count: int, interests: Sequence[str], seed: Optional[int] = None) -> List[Student]:
    """
    Random population with Faker names. Secondary interest is drawn
    independently, so it sometimes equals the primary one.
    """
    rng = random.Random(seed)
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return [
        Student(fake.name(), rng.choice(interests), rng.choice(interests))
        for _ in range(count)
    ]
