"""
Unit tests for the chained message cipher.

Tests:
- PKCS-style padding
- Seed round trips across message lengths
- Envelope structure and the empty-message vector
- Block size override and legacy profile
"""

import pytest
from unittest.mock import patch

from mathmaze.config import CipherConfig, DEFAULT_CONFIG
from mathmaze.core_crypto.prf import deterministic_bytes
from mathmaze.errors import InvalidPaddingError, EntropyUnavailableError
from mathmaze.maze.chaining import (
    MazeCipher, pkcs_pad, pkcs_unpad, block_otp, encrypt_with_seed, decrypt_with_seed
)


FIXED_IV = bytes(range(16))


class TestPadding:
    """Tests for PKCS-style padding."""

    def test_empty_gets_full_block(self):
        """Empty input pads to one block of N valued N."""
        assert pkcs_pad(b"", 16) == bytes([16]) * 16

    def test_aligned_gets_full_block(self):
        """Aligned input gains a whole block of N valued N."""
        padded = pkcs_pad(b"x" * 32, 16)
        assert len(padded) == 48
        assert padded[32:] == bytes([16]) * 16

    def test_partial_block(self):
        """Partial block is topped up with the missing count."""
        assert pkcs_pad(b"abc", 8) == b"abc" + bytes([5]) * 5

    def test_unpad(self):
        """Unpadding strips the counted bytes."""
        assert pkcs_unpad(b"abc" + bytes([5]) * 5, 8) == b"abc"

    def test_unpad_zero_rejected(self):
        """A zero pad length is rejected."""
        with pytest.raises(InvalidPaddingError):
            pkcs_unpad(b"abc\x00", 4)

    def test_unpad_too_large_rejected(self):
        """A pad length above the block size is rejected."""
        with pytest.raises(InvalidPaddingError):
            pkcs_unpad(b"abc\x05", 4)


class TestOTP:
    """Tests for per-block one-time masks."""
    def test_otp_matches_prf(self):
        """Block mask is the PRF keyed by seed + block with the OTP label."""
        assert block_otp(1000, 3) == deterministic_bytes(1003, 16, "OTP")

    def test_otp_deterministic(self):
        """Same seed and block give the same mask."""
        assert block_otp(5, 0) == block_otp(5, 0)


class TestSeedRoundTrip:
    """Round trips through encrypt_with_seed / decrypt_with_seed."""

    @pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 31, 32, 33, 64, 100])
    def test_roundtrip_lengths(self, length):
        """Messages of every length around block boundaries round trip."""
        message = bytes((i * 7 + 3) & 0xFF for i in range(length))
        seed = 0xDEADBEEF
        assert decrypt_with_seed(encrypt_with_seed(message, seed), seed) == message

    @pytest.mark.parametrize("seed", [0, 1, 255, 256, 2**64, 2**256 - 1])
    def test_roundtrip_seeds(self, seed):
        """Small, boundary and very large seeds round trip."""
        message = b"The quick brown fox jumps over the lazy dog"
        assert decrypt_with_seed(encrypt_with_seed(message, seed), seed) == message

    def test_empty_message_vector(self):
        """Seed 0, empty message: IV plus one padding block."""
        envelope = encrypt_with_seed(b"", 0)
        assert len(envelope) == 32
        assert decrypt_with_seed(envelope, 0) == b""

    def test_envelope_length(self):
        """Envelope is IV plus padded length."""
        assert len(encrypt_with_seed(b"x" * 16, 1)) == 48
        assert len(encrypt_with_seed(b"x" * 20, 1)) == 48

    def test_iv_prefix(self):
        """Envelope starts with the given IV."""
        envelope = encrypt_with_seed(b"hello", 9, iv=FIXED_IV)
        assert envelope[:16] == FIXED_IV

    def test_fixed_iv_deterministic(self):
        """A fixed IV makes encryption deterministic."""
        a = encrypt_with_seed(b"hello world", 9, iv=FIXED_IV)
        b = encrypt_with_seed(b"hello world", 9, iv=FIXED_IV)
        assert a == b

    def test_random_iv(self):
        """Fresh IVs make repeated encryptions differ."""
        assert encrypt_with_seed(b"hello", 9) != encrypt_with_seed(b"hello", 9)

    def test_chaining_hides_repeated_blocks(self):
        """Identical plaintext blocks encrypt differently."""
        envelope = encrypt_with_seed(b"A" * 48, 77, iv=FIXED_IV)
        blocks = [envelope[i:i + 16] for i in range(16, len(envelope), 16)]
        assert len(set(blocks)) == len(blocks)

    def test_bad_iv_length(self):
        """IV of the wrong size is rejected."""
        with pytest.raises(ValueError):
            encrypt_with_seed(b"x", 1, iv=b"short")

    def test_negative_seed(self):
        """Negative seeds are rejected."""
        with pytest.raises(ValueError):
            encrypt_with_seed(b"x", -5)

    def test_entropy_failure(self):
        """No IV can be drawn when the random source fails."""
        with patch("mathmaze.core_crypto.prf.secrets.token_bytes", side_effect=OSError):
            with pytest.raises(EntropyUnavailableError):
                encrypt_with_seed(b"x", 1)


class TestBlockSizeOverride:
    """Tests for non-default block sizes."""

    @pytest.mark.parametrize("block_size", [4, 8, 32])
    def test_roundtrip(self, block_size):
        """Non-default block sizes round trip."""
        message = b"block size override test message"
        envelope = encrypt_with_seed(message, 31, block_size=block_size)
        assert len(envelope) % block_size == 0
        assert decrypt_with_seed(envelope, 31, block_size=block_size) == message

    def test_aligned_padding_block(self):
        """Aligned input gains a full padding block at N=8."""
        envelope = encrypt_with_seed(b"12345678", 31, block_size=8)
        assert len(envelope) == 8 + 16

    def test_config_override(self):
        """Block size can come from the config instead of the argument."""
        config = DEFAULT_CONFIG.with_block_size(8)
        envelope = encrypt_with_seed(b"abc", 2, config=config)
        assert len(envelope) == 16
        assert decrypt_with_seed(envelope, 2, config=config) == b"abc"


class TestLegacyProfile:
    """Tests for the deployed-build compatibility profile."""
    def test_roundtrip(self):
        """Legacy profile round trips."""
        config = CipherConfig.legacy()
        message = b"legacy compatible message"
        envelope = encrypt_with_seed(message, 4242, config=config)
        assert decrypt_with_seed(envelope, 4242, config=config) == message

    def test_differs_from_default(self):
        """Legacy and default profiles produce different ciphertext."""
        legacy = encrypt_with_seed(b"abc", 1, config=CipherConfig.legacy(), iv=FIXED_IV)
        default = encrypt_with_seed(b"abc", 1, iv=FIXED_IV)
        assert legacy != default


class TestMazeCipher:
    """Tests for the MazeCipher wrapper."""
    def test_roundtrip(self):
        """Wrapper round trips a message."""
        cipher = MazeCipher(seed=0xC0FFEE)
        assert cipher.decrypt(cipher.encrypt(b"Hello, World!")) == b"Hello, World!"

    def test_properties(self):
        """Wrapper exposes its seed and config."""
        cipher = MazeCipher(seed=5)
        assert cipher.seed == 5
        assert cipher.config == DEFAULT_CONFIG
        assert "block_size=16" in repr(cipher)

    def test_negative_seed(self):
        """Negative seeds are rejected."""
        with pytest.raises(ValueError):
            MazeCipher(seed=-1)


class TestConfig:
    """Tests for CipherConfig."""
    def test_defaults(self):
        """Defaults are block size 16, 4 layers, 5 chaos iterations."""
        assert DEFAULT_CONFIG.block_size == 16
        assert DEFAULT_CONFIG.layers == 4
        assert DEFAULT_CONFIG.chaos_iterations == 5
        assert DEFAULT_CONFIG.path_length == 16 * 6 + 256

    @pytest.mark.parametrize("kwargs", [
        {"block_size": 0}, {"block_size": 256}, {"layers": 0}, {"chaos_iterations": -1},
    ])
    def test_invalid(self, kwargs):
        """Out-of-range parameters are rejected."""
        with pytest.raises(ValueError):
            CipherConfig(**kwargs)

    def test_legacy_labels(self):
        """Legacy profile carries the deployed labels and layout."""
        config = CipherConfig.legacy(block_size=8)
        assert config.block_size == 8
        assert config.path_context == "MathMazeUltraPath"
        assert config.otp_context == "MathMazeUltraOTP"
        assert config.legacy_layout
