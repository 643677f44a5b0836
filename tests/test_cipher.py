"""Tests for the modular cipher engine."""

import pytest
from otpad.core.errors import InsufficientKeyLength, PadError
from otpad.engine.cipher import decrypt, encrypt


class TestEncrypt:
    def test_example(self):
        assert encrypt([1, 2], [99, 1]) == [0, 3]

    def test_zero_key_is_identity(self):
        assert encrypt([5, 0, 59], [0, 0, 0]) == [5, 0, 59]

    def test_wraps_at_100(self):
        assert encrypt([59], [41]) == [0]
        assert encrypt([59], [50]) == [9]

    def test_excess_key_ignored(self):
        assert encrypt([1, 2], [1, 1, 7, 7, 7]) == [2, 3]

    def test_empty(self):
        assert encrypt([], []) == []

    def test_short_key_raises(self):
        with pytest.raises(InsufficientKeyLength) as excinfo:
            encrypt([1, 2, 3], [1, 2])
        assert excinfo.value.required == 3
        assert excinfo.value.available == 2


class TestDecrypt:
    def test_example(self):
        assert decrypt([0, 3], [99, 1]) == [1, 2]

    def test_never_negative(self):
        assert decrypt([0], [99]) == [1]

    def test_excess_key_ignored(self):
        assert decrypt([2, 3], [1, 1, 50]) == [1, 2]

    def test_short_key_raises(self):
        with pytest.raises(InsufficientKeyLength, match="need 2 values, got 1"):
            decrypt([1, 2], [1])

    def test_error_hierarchy(self):
        with pytest.raises(PadError):
            decrypt([1], [])
        with pytest.raises(ValueError):
            decrypt([1], [])


class TestModularTotality:
    def test_mutual_inverses(self):
        for c in range(100):
            for k in range(100):
                assert decrypt(encrypt([c], [k]), [k]) == [c]
