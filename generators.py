# generators.py
"""
Address trace generators. Each one owns its state and is a plain iterator,
so several traces can run side by side without sharing anything.
"""
from config import ConfigurationError

DRAM_SIZE = 64 * 1024 * 1024
MASK32 = 0xFFFFFFFF


class MultiplyWithCarry:
    """Marsaglia multiply-with-carry generator on 32-bit unsigned state."""

    def __init__(self, m_w=0xABABAB55, m_z=0x05080902):
        self.m_w = m_w
        self.m_z = m_z

    def next_value(self):
        self.m_z = (36969 * (self.m_z & 65535) + (self.m_z >> 16)) & MASK32
        self.m_w = (18000 * (self.m_w & 65535) + (self.m_w >> 16)) & MASK32
        return ((self.m_z << 16) + self.m_w) & MASK32


class AddressGenerator:
    def __iter__(self):
        return self

    def __next__(self):
        raise NotImplementedError


class SequentialAddressGenerator(AddressGenerator):
    """0, 1, 2, ... wrapping at `limit`."""

    def __init__(self, limit):
        self.limit = limit
        self.addr = 0

    def __next__(self):
        value = self.addr % self.limit
        self.addr = (self.addr + 1) & MASK32
        return value


class StridedAddressGenerator(AddressGenerator):
    """stride, 2*stride, ... wrapping at `limit`."""

    def __init__(self, limit, stride):
        self.limit = limit
        self.stride = stride
        self.addr = 0

    def __next__(self):
        self.addr = (self.addr + self.stride) & MASK32
        return self.addr % self.limit


class BoundedRandomAddressGenerator(AddressGenerator):
    """Multiply-with-carry output reduced modulo `limit`. Deterministic."""

    def __init__(self, limit, source=None):
        self.limit = limit
        self.source = source if source is not None else MultiplyWithCarry()

    def __next__(self):
        return self.source.next_value() % self.limit


class UniformAddressGenerator(AddressGenerator):
    """Uniform addresses in [0, limit) drawn from a numpy Generator."""

    def __init__(self, rng, limit=DRAM_SIZE):
        self.rng = rng
        self.limit = limit

    def __next__(self):
        return int(self.rng.integers(0, self.limit))


GENERATORS = {
    "gen1": lambda rng: SequentialAddressGenerator(DRAM_SIZE),
    "gen2": lambda rng: BoundedRandomAddressGenerator(128 * 1024),
    "gen3": lambda rng: BoundedRandomAddressGenerator(DRAM_SIZE),
    "gen4": lambda rng: SequentialAddressGenerator(1024),
    "gen5": lambda rng: SequentialAddressGenerator(1024 * 64),
    "gen6": lambda rng: StridedAddressGenerator(DRAM_SIZE, 256),
    "uniform": lambda rng: UniformAddressGenerator(rng),
}


def make_generator(name, rng=None):
    try:
        factory = GENERATORS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown address generator {name!r}, expected one of {sorted(GENERATORS)}"
        ) from None
    if name == "uniform" and rng is None:
        raise ConfigurationError("uniform generator needs a random number generator")
    return factory(rng)
