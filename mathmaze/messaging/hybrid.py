"""
Public-Key Messaging

Composes the trapdoor with the chained message cipher:
1. Draw a fresh 32-byte seed
2. Encapsulate the seed to the recipient's public key
3. Encrypt the message under the seed
4. Prefix the encapsulation with its length

Message Format:
    [encaps_len (4, little-endian) | encapsulated seed | envelope]

Security Note:
    Decryption depends on the trapdoor recovering the seed, which the
    current trapdoor construction does not generally do. See
    mathmaze.trapdoor.trapdoor for details.
"""

import logging
import struct
from dataclasses import dataclass

from ..config import CipherConfig, DEFAULT_CONFIG, SEED_SIZE, LENGTH_PREFIX_SIZE
from ..core_crypto.prf import bytes_to_seed, random_bytes
from ..errors import MalformedCiphertextError
from ..maze.chaining import encrypt_with_seed, decrypt_with_seed
from ..trapdoor.trapdoor import encapsulate, decapsulate


logger = logging.getLogger(__name__)


@dataclass
class CombinedCiphertext:
    """
    Container for a public-key encrypted message.

    Format: [encaps_len | encapsulation | envelope]
    """
    encapsulation: bytes
    envelope: bytes

    def to_bytes(self) -> bytes:
        """Serialize with a 4-byte little-endian length prefix."""
        return (
            struct.pack('<i', len(self.encapsulation)) +
            self.encapsulation +
            self.envelope
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> 'CombinedCiphertext':
        """
        Deserialize from bytes.

        Raises:
            MalformedCiphertextError: If the length prefix does not fit the buffer
        """
        if len(data) < LENGTH_PREFIX_SIZE:
            raise MalformedCiphertextError("Ciphertext too short for length prefix")

        enc_len = struct.unpack('<i', data[:LENGTH_PREFIX_SIZE])[0]
        if enc_len < 0 or LENGTH_PREFIX_SIZE + enc_len > len(data):
            raise MalformedCiphertextError(
                f"Encapsulation length {enc_len} inconsistent with {len(data)}-byte buffer"
            )

        offset = LENGTH_PREFIX_SIZE
        encapsulation = data[offset:offset + enc_len]
        envelope = data[offset + enc_len:]
        return cls(encapsulation, envelope)

    def to_hex(self) -> str:
        """Serialize to hex string."""
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> 'CombinedCiphertext':
        """Deserialize from hex string."""
        return cls.from_bytes(bytes.fromhex(hex_str))


def generate_seed() -> int:
    """Fresh random message seed."""
    return bytes_to_seed(random_bytes(SEED_SIZE))


def encrypt(message: bytes, recipient_public_key: bytes,
            config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """
    Encrypt a message for the holder of recipient_public_key.

    Args:
        message: Plaintext
        recipient_public_key: 64-byte trapdoor public key
        config: Cipher parameters (the recipient must use the same)

    Returns:
        Combined ciphertext bytes
    """
    seed = generate_seed()
    encaps, _ = encapsulate(seed, recipient_public_key)
    envelope = encrypt_with_seed(message, seed, config=config)
    logger.debug("Encrypted %d-byte message with %d-byte encapsulation",
                 len(message), len(encaps))
    return CombinedCiphertext(encaps, envelope).to_bytes()


def decrypt(combined: bytes, recipient_private_key: bytes,
            config: CipherConfig = DEFAULT_CONFIG) -> bytes:
    """
    Decrypt a combined ciphertext with the recipient's private key.

    Raises:
        MalformedCiphertextError: If the framing is inconsistent
        InvalidPaddingError: If the recovered seed does not decrypt cleanly
    """
    message = CombinedCiphertext.from_bytes(combined)
    seed = decapsulate(message.encapsulation, recipient_private_key)
    return decrypt_with_seed(message.envelope, seed, config=config)
