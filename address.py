# address.py
from collections import namedtuple

AddressFields = namedtuple("AddressFields", ["tag", "index", "offset"])


def log2_exact(n):
    """Bit count of a power of two (1 -> 0, 64 -> 6)."""
    return n.bit_length() - 1


def index_bits_for(config):
    return log2_exact(config.num_sets)


def decompose(address, offset_bits, index_bits):
    """
    Split an address into (tag, index, offset) so that
    address == (tag << (offset_bits + index_bits)) | (index << offset_bits) | offset.
    """
    offset = address & ((1 << offset_bits) - 1)
    index = (address >> offset_bits) & ((1 << index_bits) - 1)
    tag = address >> (offset_bits + index_bits)
    return AddressFields(tag, index, offset)
