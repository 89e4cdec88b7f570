"""
Chained Message Cipher

Encrypts whole messages with a seed using a CBC-like chain over the
layered block transform, plus a per-block one-time mask:

    C_0 = IV
    C_b = encrypt_block(P_b ^ C_{b-1}, path(seed, b)) ^ OTP(seed + b)

Envelope format:
    [IV (N) | C_1 (N) | ... | C_k (N)]

Padding is PKCS-style: padLen = N - (len mod N), a full block of N when
the message is already aligned, each pad byte equal to padLen.

Security Note:
    There is no authentication. A wrong seed or tampered ciphertext is
    only detected when the recovered padding length falls outside [1, N];
    otherwise decryption returns wrong plaintext silently.
"""

import logging
from typing import List, Optional

from ..config import CipherConfig, DEFAULT_CONFIG
from ..core_crypto.prf import deterministic_bytes, xor_bytes, random_bytes
from ..errors import InvalidPaddingError, MalformedCiphertextError
from .solving_path import generate_path
from .block_cipher import encrypt_block, decrypt_block


logger = logging.getLogger(__name__)


def pkcs_pad(data: bytes, block_size: int) -> bytes:
    """Append PKCS-style padding; aligned input gains a full block."""
    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len


def pkcs_unpad(data: bytes, block_size: int) -> bytes:
    """
    Strip PKCS-style padding.

    Only the final byte is checked; the other pad bytes are not compared.

    Raises:
        InvalidPaddingError: If the pad length is outside [1, block_size]
    """
    if not data:
        raise InvalidPaddingError("Invalid padding")
    pad_len = data[-1]
    if pad_len < 1 or pad_len > block_size:
        raise InvalidPaddingError("Invalid padding")
    return data[:-pad_len]


def block_otp(seed: int, block_index: int, config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """One-time mask for a block, keyed by seed + block_index."""
    return deterministic_bytes(seed + block_index, config.block_size, config.otp_context)


def split_blocks(data: bytes, block_size: int) -> List[bytes]:
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]


def _resolve(config: CipherConfig, block_size: Optional[int]) -> CipherConfig:
    if block_size is None or block_size == config.block_size:
        return config
    return config.with_block_size(block_size)


def encrypt_with_seed(message: bytes, seed: int,
                      block_size: Optional[int] = None,
                      config: CipherConfig = DEFAULT_CONFIG,
                      iv: Optional[bytes] = None) -> bytes:
    """
    Encrypt a message under a seed.

    Args:
        message: Plaintext of any length (including empty)
        seed: Non-negative integer key
        block_size: Override for config.block_size
        config: Cipher parameters
        iv: Fixed IV; a fresh random one is drawn when omitted

    Returns:
        Envelope bytes: IV followed by the ciphertext blocks

    Raises:
        ValueError: If seed is negative or iv has the wrong size
        EntropyUnavailableError: If no IV can be drawn
    """
    if seed < 0:
        raise ValueError("Seed must be non-negative")
    config = _resolve(config, block_size)
    n = config.block_size

    if iv is None:
        iv = random_bytes(n)
    elif len(iv) != n:
        raise ValueError(f"IV must be {n} bytes")

    padded = pkcs_pad(message, n)
    out = bytearray(iv)
    prev = iv

    for b, block in enumerate(split_blocks(padded, n)):
        path = generate_path(seed, b, config)
        middle = encrypt_block(xor_bytes(block, prev), path, config)
        final = xor_bytes(middle, block_otp(seed, b, config))
        out += final
        prev = final

    logger.debug("Encrypted %d bytes into %d blocks (N=%d)",
                 len(message), len(padded) // n, n)
    return bytes(out)


def decrypt_with_seed(cipher: bytes, seed: int,
                      block_size: Optional[int] = None,
                      config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """
    Decrypt an envelope produced by encrypt_with_seed.

    Raises:
        MalformedCiphertextError: If the envelope is not IV plus whole blocks
        InvalidPaddingError: If the recovered padding is out of range
    """
    if seed < 0:
        raise ValueError("Seed must be non-negative")
    config = _resolve(config, block_size)
    n = config.block_size

    if len(cipher) < 2 * n or len(cipher) % n != 0:
        raise MalformedCiphertextError(
            f"Envelope length {len(cipher)} is not IV plus whole {n}-byte blocks"
        )

    iv, body = cipher[:n], cipher[n:]
    prev = iv
    plain_padded = bytearray()

    for b, final in enumerate(split_blocks(body, n)):
        middle = xor_bytes(final, block_otp(seed, b, config))
        path = generate_path(seed, b, config)
        decrypted = decrypt_block(middle, path, config)
        plain_padded += xor_bytes(decrypted, prev)
        prev = final

    try:
        return pkcs_unpad(bytes(plain_padded), n)
    except InvalidPaddingError:
        logger.warning("Invalid padding after decrypting %d blocks", len(body) // n)
        raise


class MazeCipher:
    """
    Seed-keyed message cipher.

    Example:
        >>> cipher = MazeCipher(seed=0xC0FFEE)
        >>> envelope = cipher.encrypt(b"Hello, World!")
        >>> cipher.decrypt(envelope)
        b'Hello, World!'
    """

    def __init__(self, seed: int, config: CipherConfig = DEFAULT_CONFIG):
        if seed < 0:
            raise ValueError("Seed must be non-negative")
        self._seed = seed
        self._config = config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> CipherConfig:
        return self._config

    def encrypt(self, plaintext: bytes) -> bytes:
        return encrypt_with_seed(plaintext, self._seed, config=self._config)

    def decrypt(self, envelope: bytes) -> bytes:
        return decrypt_with_seed(envelope, self._seed, config=self._config)

    def __repr__(self) -> str:
        return f"MazeCipher(block_size={self._config.block_size}, layers={self._config.layers})"
