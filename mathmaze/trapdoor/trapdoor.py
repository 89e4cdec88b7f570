"""
Hash-based Trapdoor

Binds a message seed to a keypair so a sender holding only the public key
can wrap a seed for the private-key holder.

Keys:
    private = 32 random bytes
    public  = SHA512(private)

Encapsulation:
    otp    = SHA512(seed_bytes || public)
    cipher = seed_bytes XOR otp

Decapsulation:
    public = SHA512(private)
    otp    = SHA512(cipher || public)
    seed   = cipher XOR otp

Known Issue:
    Encapsulation hashes the seed bytes while decapsulation hashes the
    cipher bytes, so the two masks differ and decapsulation does not
    recover the seed except by coincidence. This is the behavior of the
    deployed construction and is kept as-is until the intended design is
    confirmed.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from cryptography.hazmat.primitives import hashes

from ..config import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE
from ..core_crypto.prf import seed_to_bytes, bytes_to_seed, random_bytes


logger = logging.getLogger(__name__)


def sha512(data: bytes) -> bytes:
    """SHA-512 digest."""
    digest = hashes.Hash(hashes.SHA512())
    digest.update(data)
    return digest.finalize()


def _mask(data: bytes, otp: bytes) -> bytes:
    return bytes(d ^ otp[i % len(otp)] for i, d in enumerate(data))


@dataclass
class TrapdoorKeyPair:
    """Trapdoor key pair container."""
    private_key: bytes
    public_key: bytes

    @classmethod
    def generate(cls) -> 'TrapdoorKeyPair':
        """Generate a fresh key pair from the secure random source."""
        return cls.from_private_bytes(random_bytes(PRIVATE_KEY_SIZE))

    @classmethod
    def from_private_bytes(cls, private_key: bytes) -> 'TrapdoorKeyPair':
        """Rebuild a key pair from a stored private key."""
        if len(private_key) != PRIVATE_KEY_SIZE:
            raise ValueError(f"Private key must be {PRIVATE_KEY_SIZE} bytes")
        return cls(bytes(private_key), sha512(private_key))


def generate_keypair() -> Tuple[bytes, bytes]:
    """
    Generate a trapdoor key pair.

    Returns:
        Tuple (public_key, private_key)
    """
    kp = TrapdoorKeyPair.generate()
    return kp.public_key, kp.private_key


def encapsulate(seed: int, public_key: bytes) -> Tuple[bytes, bytes]:
    """
    Wrap a seed for the holder of public_key's private key.

    Args:
        seed: Non-negative integer seed
        public_key: Recipient's 64-byte public key

    Returns:
        Tuple (cipher, otp); cipher has the seed's byte length
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(f"Public key must be {PUBLIC_KEY_SIZE} bytes")

    seed_bytes = seed_to_bytes(seed)
    otp = sha512(seed_bytes + public_key)
    cipher = _mask(seed_bytes, otp)
    logger.debug("Encapsulated %d-byte seed", len(seed_bytes))
    return cipher, otp


def decapsulate(cipher: bytes, private_key: bytes) -> int:
    """
    Unwrap an encapsulated seed with the private key.

    See the module notes: this does not generally return the seed that
    was passed to encapsulate.
    """
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"Private key must be {PRIVATE_KEY_SIZE} bytes")

    public_key = sha512(private_key)
    otp = sha512(bytes(cipher) + public_key)
    return bytes_to_seed(_mask(cipher, otp))
