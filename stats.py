# stats.py
from enum import Enum


class Outcome(Enum):
    HIT = "hit"
    COMPULSORY = "compulsory"
    CAPACITY = "capacity"
    CONFLICT = "conflict"


class AccessStatistics:
    """Hit and miss counters for one simulation run."""

    def __init__(self):
        self.hits = 0
        self.compulsory = 0
        self.capacity = 0
        self.conflict = 0

    def record(self, outcome):
        if outcome is Outcome.HIT:
            self.hits += 1
        elif outcome is Outcome.COMPULSORY:
            self.compulsory += 1
        elif outcome is Outcome.CAPACITY:
            self.capacity += 1
        elif outcome is Outcome.CONFLICT:
            self.conflict += 1
        else:
            raise ValueError(f"not an access outcome: {outcome!r}")

    def total_accesses(self):
        return self.hits + self.compulsory + self.capacity + self.conflict

    def misses(self):
        return self.compulsory + self.capacity + self.conflict

    def hit_rate(self):
        """Hit percentage, 0.0 before any access."""
        total = self.total_accesses()
        return 100.0 * self.hits / total if total else 0.0

    def as_dict(self):
        return {
            "total_accesses": self.total_accesses(),
            "hits": self.hits,
            "misses": self.misses(),
            "compulsory_misses": self.compulsory,
            "capacity_misses": self.capacity,
            "conflict_misses": self.conflict,
            "hit_rate": self.hit_rate(),
        }

    def __repr__(self):
        return (f"AccessStatistics(hits={self.hits}, compulsory={self.compulsory}, "
                f"capacity={self.capacity}, conflict={self.conflict})")
