"""Tests for message-level encryption."""

import pytest
from otpad.core.errors import InsufficientKeyLength
from otpad.engine import cipher
from otpad.engine.coder import decode, encode
from otpad.engine.keygen import generate_key
from otpad.engine.normalizer import normalize
from otpad.engine.pipeline import SealedMessage, decrypt, encrypt, seal


class TestEncrypt:
    def test_zero_key(self):
        assert encrypt("Hi", [0] * 5) == [8, 9, 0, 24, 24]

    def test_short_key_raises(self):
        with pytest.raises(InsufficientKeyLength):
            encrypt("Hi", [0] * 4)

    def test_excess_key_ignored(self):
        assert encrypt("Hi", [1] * 50) == [9, 10, 1, 25, 25]


class TestDecrypt:
    def test_zero_key(self):
        assert decrypt([8, 9, 0, 24, 24], [0] * 5) == "HI XX"

    def test_strips_separators(self):
        assert decrypt([0, 1, 0], [0, 0, 0]) == "A"

    def test_out_of_range_placeholder(self):
        assert decrypt([60, 1], [0, 0]) == "?A"

    def test_short_key_raises(self):
        with pytest.raises(InsufficientKeyLength):
            decrypt([1, 2, 3], [0])


class TestRoundtrip:
    @pytest.mark.parametrize("message", [
        "Hello, world!",
        "Встреча в 10:30 (у моста).",
        "café — 3 €",
        "",
        "a.. b",
    ])
    def test_recovers_decoded_text(self, message):
        expected = decode(encode(normalize(message))).strip()
        key = generate_key(len(encode(normalize(message))) + 3)
        assert decrypt(encrypt(message, key), key) == expected


class TestSeal:
    def test_fields(self):
        sealed = seal("Hello, world!")
        assert isinstance(sealed, SealedMessage)
        assert sealed.normalized == "HELLO COMMA WORLD EXCLAMATION XX"
        assert list(sealed.codes) == encode(sealed.normalized)

    def test_key_matches_code_length(self):
        sealed = seal("Привет")
        assert len(sealed.key) == len(sealed.codes)
        assert len(sealed.cipher) == len(sealed.codes)

    def test_cipher_uses_key(self):
        sealed = seal("abc")
        assert list(sealed.cipher) == cipher.encrypt(sealed.codes, sealed.key)

    def test_opens(self):
        sealed = seal("Hello, world!")
        assert decrypt(sealed.cipher, sealed.key) == sealed.normalized

    def test_frozen(self):
        sealed = seal("x")
        with pytest.raises(AttributeError):
            sealed.key = ()
