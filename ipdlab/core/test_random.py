"""Tests for the deterministic random sources."""

import random

from .random import Mulberry32, create_random_source, normalize_seed, string_to_seed


class TestStringToSeed:
    """Tests for string seed hashing."""

    def test_empty_string_hashes_to_zero(self):
        assert string_to_seed("") == 0

    def test_single_character_is_its_code(self):
        assert string_to_seed("a") == 97

    def test_rolling_hash(self):
        # 31 * 97 + 98
        assert string_to_seed("ab") == 3105

    def test_overflow_wraps_to_unsigned(self):
        value = string_to_seed("a much longer seed string that overflows")
        assert 0 <= value <= 0xFFFFFFFF


class TestNormalizeSeed:
    """Tests for numeric seed normalization."""

    def test_numeric_seed_used_directly(self):
        assert normalize_seed(42) == 42

    def test_float_seed_truncated(self):
        assert normalize_seed(42.9) == 42

    def test_negative_seed_wraps(self):
        assert normalize_seed(-1) == 0xFFFFFFFF


class TestCreateRandomSource:
    """Tests for create_random_source."""

    def test_unseeded_source_is_platform_default(self):
        assert create_random_source() is random.random

    def test_same_seed_same_stream(self):
        first = create_random_source("seed-42")
        second = create_random_source("seed-42")
        assert [first() for _ in range(50)] == [second() for _ in range(50)]

    def test_string_and_hashed_numeric_seed_match(self):
        first = create_random_source("seed-42")
        second = create_random_source(string_to_seed("seed-42"))
        assert [first() for _ in range(10)] == [second() for _ in range(10)]

    def test_different_seeds_diverge(self):
        first = create_random_source(1)
        second = create_random_source(2)
        assert [first() for _ in range(5)] != [second() for _ in range(5)]

    def test_values_in_unit_interval(self):
        source = create_random_source(123)
        values = [source() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_numeric_seed_drives_mulberry32(self):
        source = create_random_source(7)
        reference = Mulberry32(7)
        assert [source() for _ in range(5)] == [reference() for _ in range(5)]

    def test_state_stays_within_32_bits(self):
        source = Mulberry32(0xFFFFFFFF)
        for _ in range(100):
            source()
            assert 0 <= source.state <= 0xFFFFFFFF

    def test_zero_seed_uses_fallback_state(self):
        assert Mulberry32(0).state == 0xDEADBEEF
