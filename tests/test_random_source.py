from collections import Counter

import pytest

from entropass.mixing import amplify_entropy, bits_to_bytes, bits_to_int, bytes_to_bits, xor_bits
from entropass.random_source import (
    DEFAULT_SOURCE,
    SeededRandomSource,
    SystemRandomSource,
    choice,
    shuffle,
)


@pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(1)])
def test_randbelow_range_and_bad_bounds(source):
    values = {source.randbelow(5) for _ in range(500)}
    assert values == {0, 1, 2, 3, 4}
    assert source.randbelow(1) == 0
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_seeded_source_is_reproducible():
    a, b = SeededRandomSource("seed"), SeededRandomSource("seed")
    assert [a.randbelow(1000) for _ in range(10)] == [b.randbelow(1000) for _ in range(10)]


def test_choice_rejects_empty():
    with pytest.raises(IndexError):
        choice("")
    assert choice("z") == "z"


def test_shuffle_keeps_multiset(seeded):
    items = list("aabbcdefgh")
    shuffle(items, seeded)
    assert sorted(items) == sorted("aabbcdefgh")


def test_shuffle_permutations_are_uniform(seeded):
    counts = Counter()
    n = 60_000
    for _ in range(n):
        items = [0, 1, 2]
        shuffle(items, seeded)
        counts[tuple(items)] += 1
    assert len(counts) == 6
    for seen in counts.values():
        assert abs(seen - n / 6) < n / 6 * 0.05


def test_default_source_is_system_backed():
    assert isinstance(DEFAULT_SOURCE, SystemRandomSource)


def test_bit_packing_helpers():
    bits = [1, 0, 1]
    assert bits_to_bytes(bits) == bytes([0b10100000])
    assert bytes_to_bits(b"\x81") == [1, 0, 0, 0, 0, 0, 0, 1]
    assert bits_to_bytes([]) == b""
    assert bits_to_int([1, 0, 1]) == 5
    assert xor_bits([1, 1, 0], [1, 0, 0]) == [0, 1, 0]
    with pytest.raises(ValueError):
        xor_bits([1], [1, 0])


def test_packed_bytes_read_back_msb_first():
    data = bytes([0xA5, 0x3C])
    bits = bytes_to_bits(data)
    assert bits_to_bytes(bits) == data
    assert bits_to_int(bits[:8]) == 0xA5
    assert bits_to_int(bits) == 0xA53C


def test_amplify_entropy_yields_digest_bits():
    bits = [1, 0] * 10
    assert amplify_entropy(bits, 0) is bits
    mixed = amplify_entropy(bits, 2)
    assert len(mixed) == 256
    assert mixed == amplify_entropy(bits, 2)
    assert mixed != amplify_entropy(bits, 1)
