"""
Tests for the secure random source and the uniformity of word selection
"""

from collections import Counter

import pytest

from conftest import make_words
from diceware.core.passphrase import PassphraseGenerator
from diceware.core.random_source import SystemRandomSource, system_random


def chi_square(counts, expected):
    return sum((observed - expected) ** 2 / expected for observed in counts)


@pytest.mark.parametrize("bound", [0, -1])
def test_randbelow_rejects_non_positive_bound(bound):
    with pytest.raises(ValueError):
        SystemRandomSource().randbelow(bound)


def test_randbelow_of_one_is_zero():
    assert {system_random.randbelow(1) for _ in range(50)} == {0}


@pytest.mark.parametrize("bound", [2, 5, 8, 10, 1000, 7776])
def test_randbelow_stays_in_range(bound):
    for _ in range(500):
        assert 0 <= system_random.randbelow(bound) < bound


def test_randbelow_is_uniform_for_non_power_of_two_bound():
    bound = 10
    draws = 20000
    counts = Counter(system_random.randbelow(bound) for _ in range(draws))

    assert set(counts) == set(range(bound))
    # df=9, p=0.001 critical value
    assert chi_square(counts.values(), draws / bound) < 27.88


def test_word_selection_is_uniform_over_indices():
    words = make_words(1000)
    generator = PassphraseGenerator()
    generator.set_words(words)
    generator.set_word_count(50)

    counts = Counter()
    for _ in range(2000):
        counts.update(generator.generate_passphrase().split())

    observed = [counts[word] for word in words]
    assert sum(observed) == 100000
    # df=999, p=0.001 critical value is about 1143
    assert chi_square(observed, 100000 / 1000) < 1143
