# app/domain/grouping.py
"""
Pure domain logic for interest-based regrouping.

Students are bucketed by primary interest, undersized buckets are rescued
through the students' secondary interests, and every bucket is then split into
groups of 4-8 with the size-partition table. The whole pipeline is run many
times with independent randomness and the plan that leaves the fewest students
ungrouped wins.

Functions included:
- bucket_by_interest
- absorb_small_buckets
- augment_small_buckets
- partition_buckets
- generate_group_plan
- best_plan
- regroup
- summarize_plan

No DB access here; the service layer loads students and stores the groups.
"""
import logging
import random
from concurrent.futures import Executor
from dataclasses import dataclass
from functools import partial
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from app.domain.partition_table import MIN_GROUP_SIZE, split_size

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 100


@dataclass(frozen=True, eq=False)
class Student:
    """
    A student as seen by the algorithm. Compared by identity, so two students
    with the same name and interests are still two different people.
    """
    name: str
    primary_interest: str
    secondary_interest: str
    student_id: Optional[int] = None

    def __str__(self):
        return f"{self.name} {self.primary_interest} {self.secondary_interest}"


@dataclass(frozen=True)
class Group:
    interest: str
    students: Tuple[Student, ...]

    def __len__(self):
        return len(self.students)


@dataclass(frozen=True)
class PlanSummary:
    total_students: int
    total_interests: int
    total_groups: int
    grouped_students: int
    ungrouped_students: int


Buckets = Dict[str, List[Student]]
Plan = List[Group]


# ----------------------------
# Bucketing
# ----------------------------

def bucket_by_interest(students: Iterable[Student]) -> Buckets:
    """
    Put every student into the bucket of their primary interest.
    Buckets keep the order in which interests are first seen.

    >>> s = [Student("a", "chess", "go"), Student("b", "go", "go"), Student("c", "chess", "go")]
    >>> [(k, [x.name for x in v]) for k, v in bucket_by_interest(s).items()]
    [('chess', ['a', 'c']), ('go', ['b'])]
    """
    buckets: Buckets = {}
    for student in students:
        buckets.setdefault(student.primary_interest, []).append(student)
    return buckets


# ----------------------------
# Absorption
# ----------------------------

def _can_move_to_secondary(student: Student, buckets: Buckets) -> bool:
    if student.secondary_interest == student.primary_interest:
        return False
    receiving = buckets.get(student.secondary_interest)
    # A missing bucket does not block the move, but nothing moves into it either
    return receiving is None or len(receiving) >= MIN_GROUP_SIZE - 1


def absorb_small_buckets(buckets: Buckets) -> Buckets:
    """
    Dissolve buckets with fewer than 4 students into the students' secondary
    interests. A bucket is only dissolved if every one of its students can
    move: their secondary interest must differ from the primary one and its
    bucket must hold at least 3 students (or not exist). Otherwise the
    bucket is left exactly as it was.

    Students whose secondary interest has no bucket are dropped from the
    buckets and stay ungrouped.

    Mutates and returns `buckets`.
    """
    for interest in list(buckets):
        members = buckets[interest]
        if len(members) >= MIN_GROUP_SIZE:
            continue
        if not all(_can_move_to_secondary(s, buckets) for s in members):
            continue

        for s in members:
            if s.secondary_interest in buckets:
                buckets[s.secondary_interest].append(s)
        del buckets[interest]
        logger.debug("Absorbed %d students of '%s' into secondary interests", len(members), interest)

    return buckets


# ----------------------------
# Augmentation
# ----------------------------

def _target_shortfall(size: int, rng: random.Random) -> int:
    # 50% chance to aim for a 5 or 6 person group instead of a 4 person one
    needed = MIN_GROUP_SIZE - size
    if rng.random() < 0.5:
        needed += 1
        if rng.random() < 0.5:
            needed += 1
    return needed


def _pull_from_donors(scratch: Buckets, interest: str, needed: int) -> List[Student]:
    """
    Take up to `needed` students whose secondary interest is `interest` out of
    the other buckets in `scratch`. A donor gives nothing once it is down to
    4 students.
    """
    taken: List[Student] = []
    for donor in scratch.values():
        if len(taken) == needed:
            break
        for s in list(donor):
            if len(donor) <= MIN_GROUP_SIZE:
                break
            if s.secondary_interest == interest:
                donor.remove(s)
                taken.append(s)
                if len(taken) == needed:
                    break
    return taken


def augment_small_buckets(buckets: Buckets, rng: random.Random) -> Buckets:
    """
    Grow buckets of 2-3 students by pulling in students from larger buckets
    who list the interest as their secondary one.

    The target size is 4, 5 or 6 (probability 1/2, 1/4, 1/4). The move is
    tried on a copy of all buckets and only applied if the full target is
    reached; the pulled students go to the end of the target bucket. Buckets
    are processed in order, so an applied move shrinks the donor pool for
    every interest after it.

    Mutates and returns `buckets`.
    """
    for interest in buckets:
        size = len(buckets[interest])
        if not 2 <= size < MIN_GROUP_SIZE:
            continue

        needed = _target_shortfall(size, rng)
        scratch = {key: list(members) for key, members in buckets.items()}
        taken = _pull_from_donors(scratch, interest, needed)

        if len(taken) < needed:
            logger.debug("Could not grow '%s' from %d: %d of %d donors found", interest, size, len(taken), needed)
            continue

        scratch[interest].extend(taken)
        buckets.update(scratch)
        logger.debug("Grew '%s' from %d to %d", interest, size, len(scratch[interest]))

    return buckets


# ----------------------------
# Partitioning
# ----------------------------

def partition_buckets(buckets: Buckets) -> Plan:
    """
    Split every bucket into groups following the size-partition table.
    Students are taken from the end of the bucket; whatever is left once a
    bucket is down to 1-3 stays ungrouped.

    Drains the buckets.

    >>> b = {"go": [Student(str(i), "go", "go") for i in range(9)]}
    >>> [[s.name for s in g.students] for g in partition_buckets(b)]
    [['8', '7', '6', '5', '4'], ['0', '1', '2', '3']]
    """
    groups: Plan = []
    for interest, members in buckets.items():
        while members:
            take = split_size(len(members))
            if take == 0:
                break
            if take == len(members):
                batch = list(members)
                members.clear()
            else:
                batch = [members.pop() for _ in range(take)]
            groups.append(Group(interest, tuple(batch)))
    return groups


# ----------------------------
# Trials
# ----------------------------

def count_ungrouped(students: Sequence[Student], plan: Plan) -> int:
    return len(students) - sum(len(g) for g in plan)


def generate_group_plan(
    students: Sequence[Student],
    rng: Optional[random.Random] = None,
    shuffle: bool = False,
) -> Plan:
    """
    Run one trial: bucket, absorb, augment, partition.

    Bucket order follows the input order unless `shuffle` is set, in which
    case a shuffled copy of the students is bucketed instead.
    """
    rng = rng or random.Random()
    ordered = list(students)
    if shuffle:
        rng.shuffle(ordered)

    buckets = bucket_by_interest(ordered)
    absorb_small_buckets(buckets)
    augment_small_buckets(buckets, rng)
    return partition_buckets(buckets)


def _run_trial(students: Sequence[Student], seed: int, shuffle: bool = False) -> Tuple[int, Plan]:
    plan = generate_group_plan(students, random.Random(seed), shuffle=shuffle)
    return count_ungrouped(students, plan), plan


def best_plan(outcomes: Iterable[Tuple[int, Plan]]) -> Plan:
    """
    Pick the plan with the fewest ungrouped students. On a tie the earlier
    trial wins.

    outcomes: (ungrouped_count, plan) per trial, in trial order
    """
    indexed = list(enumerate(outcomes))
    if not indexed:
        raise ValueError("no trial outcomes to choose from")
    _, (_, plan) = min(indexed, key=lambda item: (item[1][0], item[0]))
    return plan


def regroup(
    students: Sequence[Student],
    trials: int = DEFAULT_TRIALS,
    rng: Optional[random.Random] = None,
    executor: Optional[Executor] = None,
    shuffle: bool = False,
) -> Plan:
    """
    Generate `trials` group plans and return the one that leaves the fewest
    students behind.

    Each trial gets its own generator seeded from `rng`, so the result is the
    same whether trials run in-process or on `executor`. Use a thread pool:
    a process pool would hand back copies of the students.

    Example:
    >>> regroup([])
    []
    """
    if students is None:
        raise ValueError("students must be a sequence, got None")
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    students = list(students)
    rng = rng or random.Random()
    seeds = [rng.getrandbits(64) for _ in range(trials)]

    run = partial(_run_trial, students, shuffle=shuffle)
    mapper = executor.map if executor is not None else map
    outcomes = list(mapper(run, seeds))
    for i, (ungrouped, plan) in enumerate(outcomes):
        logger.debug("Trial %d: %d groups, %d ungrouped", i, len(plan), ungrouped)

    plan = best_plan(outcomes)
    logger.info(
        "Regrouped %d students into %d groups over %d trials (%d ungrouped)",
        len(students), len(plan), trials, count_ungrouped(students, plan),
    )
    return plan


def summarize_plan(students: Sequence[Student], plan: Plan) -> PlanSummary:
    interests = {s.primary_interest for s in students} | {s.secondary_interest for s in students}
    grouped = sum(len(g) for g in plan)
    return PlanSummary(
        total_students=len(students),
        total_interests=len(interests),
        total_groups=len(plan),
        grouped_students=grouped,
        ungrouped_students=len(students) - grouped,
    )
