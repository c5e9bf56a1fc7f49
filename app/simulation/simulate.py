# app/simulation/simulate.py
"""
Simulation script: runs the regroup algorithm on the sample population (or a
random Faker population) and prints the groups and totals.

Uses the domain functions directly (no DB, no HTTP calls).

    python -m app.simulation.simulate
    python -m app.simulation.simulate --random 300 --interests 25 --seed 4
"""
import argparse
import logging
import random

from app.config.settings import settings
from app.domain.grouping import regroup, summarize_plan
from app.simulation.sample_data import generate_students, sample_students


def run_simulation(students, trials: int, seed: int = None):
    plan = regroup(students, trials, rng=random.Random(seed))

    for g in plan:
        print(f"[{g.interest}] " + ", ".join(str(s) for s in g.students))

    summary = summarize_plan(students, plan)
    print("Total Students:", summary.total_students)
    print("Total Interests:", summary.total_interests)
    print("Total Final Groups:", summary.total_groups)
    print("Students put into groups:", summary.grouped_students)
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the regroup algorithm on a sample population.")
    parser.add_argument("--random", type=int, default=None, metavar="N",
                        help="generate N random students instead of the sample set")
    parser.add_argument("--interests", type=int, default=16,
                        help="number of distinct interests for --random (default: 16)")
    parser.add_argument("--trials", type=int, default=settings.REGROUP_TRIALS)
    parser.add_argument("--seed", type=int, default=settings.REGROUP_SEED)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.random is not None:
        interests = [str(i + 1) for i in range(args.interests)]
        students = generate_students(args.random, interests, seed=args.seed)
    else:
        students = sample_students()

    run_simulation(students, args.trials, args.seed)


if __name__ == "__main__":
    main()
