# cache.py
import numpy as np

from address import decompose, index_bits_for, log2_exact
from config import CacheType, ConfigurationError, ReplacementPolicy
from replacement import random_way, select_victim
from stats import Outcome


class CacheBlock:
    """
    One storage slot. timestamp drives LRU/FIFO, frequency drives LFU.
    Slots start invalid and live as long as the cache does.
    """

    __slots__ = ("valid", "tag", "timestamp", "frequency")

    def __init__(self):
        self.valid = False
        self.tag = 0
        self.timestamp = 0
        self.frequency = 0

    def __repr__(self):
        return f"CacheBlock(valid={self.valid}, tag={self.tag:#x}, ts={self.timestamp}, freq={self.frequency})"


class BaseCache:
    def __init__(self, config):
        self.config = config
        self.num_blocks = config.num_blocks
        self.offset_bits = log2_exact(config.block_size)
        self.index_bits = index_bits_for(config)

    def fields(self, address):
        return decompose(address, self.offset_bits, self.index_bits)

    def access(self, address):
        raise NotImplementedError

    def valid_blocks(self):
        raise NotImplementedError


class DirectMappedCache(BaseCache):
    """One slot per index; placement is forced by the address bits."""

    def __init__(self, config):
        super().__init__(config)
        self.blocks = [CacheBlock() for _ in range(self.num_blocks)]

    def access(self, address):
        tag, index, _ = self.fields(address)
        block = self.blocks[index]
        if block.valid and block.tag == tag:
            return Outcome.HIT
        outcome = Outcome.CONFLICT if block.valid else Outcome.COMPULSORY
        block.tag = tag
        block.valid = True
        return outcome

    def valid_blocks(self):
        return sum(1 for b in self.blocks if b.valid)


class SetAssociativeCache(BaseCache):
    """
    num_sets groups of `ways` slots each. A full set evicts a random way,
    and that miss is counted as conflict (capacity and conflict are not
    told apart here).
    """

    def __init__(self, config, rng):
        super().__init__(config)
        self.ways = config.ways
        self.num_sets = config.num_sets
        self.rng = rng
        self.sets = [[CacheBlock() for _ in range(self.ways)] for _ in range(self.num_sets)]

    def access(self, address):
        tag, index, _ = self.fields(address)
        ways = self.sets[index]

        for block in ways:
            if block.valid and block.tag == tag:
                return Outcome.HIT

        for block in ways:
            if not block.valid:
                block.valid = True
                block.tag = tag
                return Outcome.COMPULSORY

        ways[random_way(self.rng, self.ways)].tag = tag
        return Outcome.CONFLICT

    def valid_blocks(self):
        return sum(1 for s in self.sets for b in s if b.valid)


class FullyAssociativeCache(BaseCache):
    """
    All blocks form one set. Slots are filled in order while the cache warms
    up (compulsory misses); once full every miss is a capacity miss and the
    replacement policy picks the victim.
    """

    def __init__(self, config, rng):
        super().__init__(config)
        self.policy = config.policy
        self.rng = rng
        self.blocks = [CacheBlock() for _ in range(self.num_blocks)]
        self.filled = 0
        self.clock = 0

    def access(self, address):
        self.clock += 1
        tag = self.fields(address).tag

        for i in range(self.filled):
            block = self.blocks[i]
            if block.tag == tag:
                if self.policy is ReplacementPolicy.LRU:
                    block.timestamp = self.clock
                elif self.policy is ReplacementPolicy.LFU:
                    block.frequency += 1
                return Outcome.HIT

        if self.filled < self.num_blocks:
            victim = self.filled
            self.filled += 1
            outcome = Outcome.COMPULSORY
        else:
            victim = select_victim(self.policy, self.blocks, self.rng)
            outcome = Outcome.CAPACITY

        block = self.blocks[victim]
        block.tag = tag
        block.valid = True
        block.timestamp = self.clock
        block.frequency = 1
        return outcome

    def valid_blocks(self):
        return self.filled


def build_cache(config, rng=None):
    """Pick the organization for a validated CacheConfiguration."""
    if rng is None:
        rng = np.random.default_rng()
    if config.organization is CacheType.DIRECT_MAPPED:
        return DirectMappedCache(config)
    if config.organization is CacheType.SET_ASSOCIATIVE:
        return SetAssociativeCache(config, rng)
    if config.organization is CacheType.FULLY_ASSOCIATIVE:
        return FullyAssociativeCache(config, rng)
    raise ConfigurationError(f"unknown cache organization: {config.organization!r}")
