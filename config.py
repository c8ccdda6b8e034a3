# config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigurationError(ValueError):
    """Cache geometry or organization parameters are not usable."""


class InvalidPolicySelection(ConfigurationError):
    """Replacement policy tag is unknown or missing."""


class CacheType(Enum):
    DIRECT_MAPPED = "direct"
    SET_ASSOCIATIVE = "set"
    FULLY_ASSOCIATIVE = "fully"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        aliases = {
            "direct": cls.DIRECT_MAPPED,
            "direct_mapped": cls.DIRECT_MAPPED,
            "set": cls.SET_ASSOCIATIVE,
            "set_associative": cls.SET_ASSOCIATIVE,
            "fully": cls.FULLY_ASSOCIATIVE,
            "fully_associative": cls.FULLY_ASSOCIATIVE,
        }
        if key not in aliases:
            raise ConfigurationError(f"unknown cache organization: {value!r}")
        return aliases[key]


class ReplacementPolicy(Enum):
    LRU = "LRU"
    LFU = "LFU"
    FIFO = "FIFO"
    RANDOM = "RANDOM"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise InvalidPolicySelection(f"unknown replacement policy: {value!r}") from None


def is_power_of_two(n):
    return isinstance(n, int) and not isinstance(n, bool) and n > 0 and n & (n - 1) == 0


@dataclass(frozen=True)
class CacheConfiguration:
    """
    Validated cache geometry for one simulation run.
    capacity_bytes and block_size are byte counts; ways is only meaningful
    for set-associative caches and policy only for fully-associative ones.
    """

    capacity_bytes: int
    block_size: int
    organization: CacheType
    ways: Optional[int] = None
    policy: Optional[ReplacementPolicy] = None

    def __post_init__(self):
        if not is_power_of_two(self.capacity_bytes):
            raise ConfigurationError(f"capacity must be a power of two, got {self.capacity_bytes}")
        if not is_power_of_two(self.block_size):
            raise ConfigurationError(f"block size must be a power of two, got {self.block_size}")
        if self.capacity_bytes < self.block_size:
            raise ConfigurationError("capacity must be at least one block")
        if not isinstance(self.organization, CacheType):
            raise ConfigurationError(f"unknown cache organization: {self.organization!r}")

        if self.organization is CacheType.SET_ASSOCIATIVE:
            if not is_power_of_two(self.ways):
                raise ConfigurationError(f"way count must be a power of two, got {self.ways}")
            if self.num_blocks % self.ways != 0:
                raise ConfigurationError(
                    f"{self.ways} ways do not divide {self.num_blocks} blocks evenly"
                )
        elif self.organization is CacheType.FULLY_ASSOCIATIVE:
            if self.policy is None:
                raise InvalidPolicySelection("fully-associative cache needs a replacement policy")
            if not isinstance(self.policy, ReplacementPolicy):
                raise InvalidPolicySelection(f"unknown replacement policy: {self.policy!r}")

    @property
    def num_blocks(self):
        return self.capacity_bytes // self.block_size

    @property
    def num_sets(self):
        # indexable groups per organization
        if self.organization is CacheType.DIRECT_MAPPED:
            return self.num_blocks
        if self.organization is CacheType.SET_ASSOCIATIVE:
            return self.num_blocks // self.ways
        return 1

    @classmethod
    def from_dict(cls, cache_cfg):
        """
        Build from the "cache" section of the JSON config:
        size_kb, line_size_bytes, organization, associativity, policy.
        """
        organization = CacheType.parse(cache_cfg.get("organization", "direct"))
        ways = None
        policy = None
        if organization is CacheType.SET_ASSOCIATIVE:
            ways = cache_cfg.get("associativity")
        elif organization is CacheType.FULLY_ASSOCIATIVE:
            raw = cache_cfg.get("policy")
            if raw is None:
                raise InvalidPolicySelection("fully-associative cache needs a replacement policy")
            policy = ReplacementPolicy.parse(raw)
        return cls(
            capacity_bytes=cache_cfg.get("size_kb", 64) * 1024,
            block_size=cache_cfg.get("line_size_bytes", 64),
            organization=organization,
            ways=ways,
            policy=policy,
        )

    def describe(self):
        if self.capacity_bytes < 1024:
            size = f"{self.capacity_bytes}B"
        else:
            size = f"{self.capacity_bytes // 1024}KB"
        text = f"{self.organization.value} {size}/{self.block_size}B"
        if self.ways is not None:
            text += f" {self.ways}-way"
        if self.policy is not None:
            text += f" {self.policy.value}"
        return text
