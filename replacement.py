# replacement.py
from config import ReplacementPolicy


def random_way(rng, ways):
    return int(rng.integers(0, ways))


def select_victim(policy, blocks, rng=None):
    """
    Pick the slot to evict from a full candidate set.
    FIFO and LRU both take the oldest timestamp (FIFO timestamps are never
    refreshed on a hit), LFU the smallest access count. Ties go to the
    lowest slot index.
    """
    if policy is ReplacementPolicy.RANDOM:
        return random_way(rng, len(blocks))
    if policy in (ReplacementPolicy.LRU, ReplacementPolicy.FIFO):
        return min(range(len(blocks)), key=lambda i: blocks[i].timestamp)
    if policy is ReplacementPolicy.LFU:
        return min(range(len(blocks)), key=lambda i: blocks[i].frequency)
    raise ValueError(f"no victim selection for {policy!r}")
