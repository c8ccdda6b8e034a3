import pytest

from config import (
    CacheConfiguration,
    CacheType,
    ConfigurationError,
    InvalidPolicySelection,
    ReplacementPolicy,
)


def test_valid_configurations(make_config):
    cfg = make_config("set", 16 * 1024, 32, ways=4)
    assert cfg.num_blocks == 512
    assert cfg.num_sets == 128
    assert make_config("direct", 16 * 1024, 32).num_sets == 512
    assert make_config("fully", 16 * 1024, 32, policy="LFU").num_sets == 1


@pytest.mark.parametrize("capacity,block", [(24, 4), (16, 6), (0, 4), (16, 0), (4, 8)])
def test_bad_geometry_rejected(make_config, capacity, block):
    with pytest.raises(ConfigurationError):
        make_config("direct", capacity, block)


@pytest.mark.parametrize("ways", [None, 0, 3, 6, 8])
def test_bad_way_count_rejected(make_config, ways):
    # 16 / 4 = 4 blocks, so 8 ways cannot divide them
    with pytest.raises(ConfigurationError):
        make_config("set", 16, 4, ways=ways)


def test_fully_associative_needs_policy(make_config):
    with pytest.raises(InvalidPolicySelection):
        make_config("fully", 16, 4)


def test_unknown_policy_tag():
    with pytest.raises(InvalidPolicySelection):
        ReplacementPolicy.parse("MRU")
    assert ReplacementPolicy.parse("lru") is ReplacementPolicy.LRU
    assert issubclass(InvalidPolicySelection, ConfigurationError)


def test_unknown_organization():
    with pytest.raises(ConfigurationError):
        CacheType.parse("skewed")
    assert CacheType.parse("set-associative") is CacheType.SET_ASSOCIATIVE


def test_from_dict():
    cfg = CacheConfiguration.from_dict({
        "organization": "fully",
        "size_kb": 16,
        "line_size_bytes": 32,
        "policy": "fifo",
    })
    assert cfg.capacity_bytes == 16 * 1024
    assert cfg.block_size == 32
    assert cfg.organization is CacheType.FULLY_ASSOCIATIVE
    assert cfg.policy is ReplacementPolicy.FIFO
    assert cfg.ways is None


def test_from_dict_ignores_parameters_of_other_organizations():
    cfg = CacheConfiguration.from_dict({"organization": "direct", "associativity": 3, "policy": "bogus"})
    assert cfg.ways is None
    assert cfg.policy is None
    assert cfg.capacity_bytes == 64 * 1024
    assert cfg.block_size == 64


def test_from_dict_rejects_bad_policy():
    with pytest.raises(InvalidPolicySelection):
        CacheConfiguration.from_dict({"organization": "fully", "policy": "newest"})
    with pytest.raises(InvalidPolicySelection):
        CacheConfiguration.from_dict({"organization": "fully"})


def test_configuration_is_immutable(make_config):
    cfg = make_config("direct")
    with pytest.raises(AttributeError):
        cfg.block_size = 8


def test_describe(make_config):
    assert make_config("set", 16 * 1024, 32, ways=4).describe() == "set 16KB/32B 4-way"
    assert make_config("fully", 16 * 1024, 32, policy="LRU").describe() == "fully 16KB/32B LRU"


@pytest.mark.parametrize("ways", [True, False])
def test_bool_way_count_rejected(make_config, ways):
    with pytest.raises(ConfigurationError):
        make_config("set", 16, 4, ways=ways)


def test_bool_block_size_rejected(make_config):
    with pytest.raises(ConfigurationError):
        make_config("direct", 16, True)


def test_describe_small_capacity_in_bytes(make_config):
    assert make_config("direct").describe() == "direct 16B/4B"
    assert make_config("set", 512, 16, ways=2).describe() == "set 512B/16B 2-way"
    assert make_config("direct", 1024, 16).describe() == "direct 1KB/16B"
