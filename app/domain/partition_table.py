# app/domain/partition_table.py
"""
Size-partition policy for splitting an interest bucket into groups.

Each entry maps the number of students still left in a bucket to how many of
them go into the next group. The table is tuned so a bucket of 4..23 never
drops into 1..3 before it is empty; 24 and above peel off groups of 6 until
the table takes over again.
"""
from typing import Dict

MIN_GROUP_SIZE = 4
MAX_GROUP_SIZE = 8
OVERFLOW_SPLIT = 6

PARTITION_TABLE: Dict[int, int] = {
    # 1-3: can't give these people a group
    1: 0, 2: 0, 3: 0,
    # 4-8: everyone left becomes one group
    4: 4, 5: 5, 6: 6, 7: 7, 8: 8,
    9: 5, 10: 5,
    11: 6, 12: 6, 17: 6, 18: 6,
    13: 7, 14: 7, 19: 7, 20: 7, 21: 7,
    15: 7, 16: 7, 22: 7, 23: 7,
}


def split_size(remaining: int) -> int:
    """
    Number of students to take off a bucket holding `remaining` students.
    0 means the remainder can't be placed and the bucket is done.

    >>> split_size(9)
    5
    >>> split_size(3)
    0
    """
    if remaining <= 0:
        return 0
    return PARTITION_TABLE.get(remaining, OVERFLOW_SPLIT)
