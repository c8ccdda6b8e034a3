import pytest

from address import decompose, index_bits_for, log2_exact


def test_decompose_known_address():
    fields = decompose(0b101101101101, offset_bits=2, index_bits=3)
    assert fields == (91, 3, 1)
    assert fields.tag == 91
    assert fields.index == 3
    assert fields.offset == 1


@pytest.mark.parametrize("address", [0, 1, 0x1F, 0xDEADBEEF, 0xFFFFFFFF, 1 << 40])
@pytest.mark.parametrize("offset_bits,index_bits", [(0, 0), (2, 3), (5, 9), (6, 0)])
def test_fields_recompose_to_address(address, offset_bits, index_bits):
    tag, index, offset = decompose(address, offset_bits, index_bits)
    assert (tag << (offset_bits + index_bits)) | (index << offset_bits) | offset == address
    assert offset < (1 << offset_bits)
    assert index < (1 << index_bits)


def test_no_index_bits_means_single_set():
    tag, index, offset = decompose(0x1234, offset_bits=4, index_bits=0)
    assert index == 0
    assert tag == 0x123
    assert offset == 0x4


def test_log2_exact():
    assert log2_exact(1) == 0
    assert log2_exact(2) == 1
    assert log2_exact(64) == 6
    assert log2_exact(16 * 1024) == 14


def test_index_bits_per_organization(make_config):
    # 16KB / 32B = 512 blocks
    assert index_bits_for(make_config("direct", 16 * 1024, 32)) == 9
    assert index_bits_for(make_config("set", 16 * 1024, 32, ways=4)) == 7
    assert index_bits_for(make_config("fully", 16 * 1024, 32, policy="LRU")) == 0
