"""
Unit tests for public-key messaging.

Tests:
- Combined ciphertext framing
- Encrypt output structure
- Decrypt composition
"""

import struct
import pytest
from unittest.mock import patch

from mathmaze.errors import InvalidPaddingError, MalformedCiphertextError
from mathmaze.maze.chaining import encrypt_with_seed
from mathmaze.messaging.hybrid import CombinedCiphertext, generate_seed, encrypt, decrypt
from mathmaze.trapdoor.trapdoor import TrapdoorKeyPair


class TestCombinedCiphertext:
    """Tests for the length-prefixed container."""

    def test_to_bytes_layout(self):
        """Prefix is the little-endian encapsulation length."""
        msg = CombinedCiphertext(b"\x01\x02\x03", b"E" * 32)
        data = msg.to_bytes()
        assert data[:4] == struct.pack("<i", 3)
        assert data[4:7] == b"\x01\x02\x03"
        assert data[7:] == b"E" * 32

    def test_from_bytes(self):
        """Parsing recovers both parts."""
        msg = CombinedCiphertext(b"seed", b"envelope")
        assert CombinedCiphertext.from_bytes(msg.to_bytes()) == msg

    def test_hex(self):
        """Hex serialization round trips."""
        msg = CombinedCiphertext(b"seed", b"envelope")
        assert CombinedCiphertext.from_hex(msg.to_hex()) == msg

    def test_too_short(self):
        """A buffer shorter than the prefix is rejected."""
        with pytest.raises(MalformedCiphertextError):
            CombinedCiphertext.from_bytes(b"\x01\x00")

    def test_length_exceeds_buffer(self):
        """A prefix longer than the buffer is rejected."""
        with pytest.raises(MalformedCiphertextError):
            CombinedCiphertext.from_bytes(struct.pack("<i", 100) + b"x" * 10)

    def test_negative_length(self):
        """A negative prefix is rejected."""
        with pytest.raises(MalformedCiphertextError):
            CombinedCiphertext.from_bytes(struct.pack("<i", -1) + b"x" * 10)


class TestEncrypt:
    """Tests for public-key encryption."""
    def test_generate_seed_range(self):
        """Fresh seeds are 32-byte integers."""
        seed = generate_seed()
        assert 0 <= seed < 2**256

    def test_structure(self):
        """Output is prefix, encapsulation, then an IV-plus-blocks envelope."""
        kp = TrapdoorKeyPair.generate()
        combined = encrypt(b"hello there", kp.public_key)
        msg = CombinedCiphertext.from_bytes(combined)
        assert 1 <= len(msg.encapsulation) <= 32
        assert len(msg.envelope) == 32

    def test_fresh_seed_each_time(self):
        """Each encryption uses a new seed and IV."""
        kp = TrapdoorKeyPair.generate()
        assert encrypt(b"same", kp.public_key) != encrypt(b"same", kp.public_key)


class TestDecrypt:
    """Tests for public-key decryption."""
    def test_roundtrip_when_seed_recovered(self):
        """With the seed handed back correctly, decrypt returns the message."""
        kp = TrapdoorKeyPair.generate()
        seed = 0x1234567890
        with patch("mathmaze.messaging.hybrid.generate_seed", return_value=seed):
            combined = encrypt(b"composed message", kp.public_key)
        with patch("mathmaze.messaging.hybrid.decapsulate", return_value=seed):
            assert decrypt(combined, kp.private_key) == b"composed message"

    def test_observed_trapdoor_behavior(self):
        """Without a recoverable seed, decrypt fails or returns other bytes."""
        kp = TrapdoorKeyPair.generate()
        message = b"this will not come back intact"
        combined = encrypt(message, kp.public_key)
        try:
            result = decrypt(combined, kp.private_key)
        except InvalidPaddingError:
            return
        assert result != message

    def test_malformed_envelope(self):
        """A broken envelope raises a framing error."""
        kp = TrapdoorKeyPair.generate()
        combined = CombinedCiphertext(b"\x01", b"x" * 20).to_bytes()
        with pytest.raises(MalformedCiphertextError):
            decrypt(combined, kp.private_key)

    def test_envelope_matches_seed_cipher(self):
        """The envelope part is the seed cipher's output for the same seed."""
        kp = TrapdoorKeyPair.generate()
        seed = 777
        iv = bytes(16)
        with patch("mathmaze.messaging.hybrid.generate_seed", return_value=seed), \
             patch("mathmaze.core_crypto.prf.secrets.token_bytes", return_value=iv):
            combined = encrypt(b"abc", kp.public_key)
        msg = CombinedCiphertext.from_bytes(combined)
        assert msg.envelope == encrypt_with_seed(b"abc", seed, iv=iv)
