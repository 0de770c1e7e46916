import itertools
from collections import Counter

import pytest

from entropass.config import CHARACTER_SETS, CharacterClass, GenerationOptions
from entropass.entropy import calculate_entropy
from entropass.errors import ValidationErrorKind
from entropass.generator import PasswordResult, generate_password
from entropass.pool import build_character_pool
from entropass.random_source import SeededRandomSource

ALL_CLASS_SETS = [
    frozenset(combo)
    for r in range(1, 5)
    for combo in itertools.combinations(CharacterClass, r)
]


def chi_square(counts, expected):
    return sum((counts.get(ch, 0) - e) ** 2 / e for ch, e in expected.items())


@pytest.mark.parametrize("classes", ALL_CLASS_SETS)
@pytest.mark.parametrize("length", [8, 9, 16, 64])
def test_length_and_class_coverage(classes, length, seeded):
    options = GenerationOptions(length, classes)
    for _ in range(20):
        result = generate_password(options, seeded).unwrap()
        assert len(result.password) == length
        for cls, alphabet in CHARACTER_SETS.items():
            hits = sum(ch in alphabet for ch in result.password)
            if cls in classes:
                assert hits >= 1
            else:
                assert hits == 0


def test_entropy_models_the_space_not_the_string(seeded):
    options = GenerationOptions(10, {CharacterClass.UPPERCASE, CharacterClass.LOWERCASE, CharacterClass.NUMBERS})
    first = generate_password(options, seeded).unwrap()
    second = generate_password(options, seeded).unwrap()
    assert first.password != second.password
    assert first.pool_size == second.pool_size == 62
    assert first.entropy_bits == second.entropy_bits == calculate_entropy(62, 10)


def test_result_is_immutable(seeded):
    result = generate_password(None, seeded).unwrap()
    assert isinstance(result, PasswordResult)
    assert len(result.password) == 16
    assert result.pool_size == 88
    with pytest.raises(AttributeError):
        result.password = "x"


def test_invalid_options_draw_nothing(exploding):
    result = generate_password(GenerationOptions(7), exploding)
    assert result.error.kind is ValidationErrorKind.INVALID_LENGTH

    result = generate_password(GenerationOptions(16, set()), exploding)
    assert result.error.kind is ValidationErrorKind.NO_CHARACTER_CLASS_SELECTED


def test_same_seed_same_password():
    options = GenerationOptions(24)
    a = generate_password(options, SeededRandomSource(7)).unwrap()
    b = generate_password(options, SeededRandomSource(7)).unwrap()
    assert a == b


def test_guaranteed_characters_are_not_pinned_to_a_position(seeded):
    options = GenerationOptions(8, {CharacterClass.UPPERCASE, CharacterClass.NUMBERS})
    digit_positions = Counter()
    for _ in range(2000):
        password = generate_password(options, seeded).unwrap().password
        for i, ch in enumerate(password):
            if ch.isdigit():
                digit_positions[i] += 1
    assert set(digit_positions) == set(range(8))


def test_single_class_positions_are_uniform(seeded):
    options = GenerationOptions(8, {CharacterClass.LOWERCASE})
    alphabet = CHARACTER_SETS[CharacterClass.LOWERCASE]
    samples = [generate_password(options, seeded).unwrap().password for _ in range(10_000)]

    expected = {ch: len(samples) / len(alphabet) for ch in alphabet}
    for position in range(8):
        counts = Counter(pw[position] for pw in samples)
        # 25 degrees of freedom; 75 is far past the 0.999 quantile (52.6).
        assert chi_square(counts, expected) < 75


def test_mixed_class_positions_match_expected_distribution(seeded):
    # Half the characters are guaranteed picks (uniform within their class),
    # half are pool fills (uniform over 88). After shuffling every position
    # follows that mixture.
    length = 8
    options = GenerationOptions(length, set(CharacterClass))
    pool = build_character_pool(CharacterClass)
    n = 10_000
    samples = [generate_password(options, seeded).unwrap().password for _ in range(n)]

    guaranteed_share = len(CharacterClass) / length
    expected = {}
    for alphabet in CHARACTER_SETS.values():
        for ch in alphabet:
            p = guaranteed_share / len(CharacterClass) / len(alphabet)
            p += (1 - guaranteed_share) / len(pool)
            expected[ch] = n * p
    assert sum(expected.values()) == pytest.approx(n)

    for position in range(length):
        counts = Counter(pw[position] for pw in samples)
        # 87 degrees of freedom; 0.999 quantile is about 127.
        assert chi_square(counts, expected) < 160
