# Trapdoor Module
"""
Hash-based seed encapsulation:
- Key pair generation (public = SHA-512 of a 32-byte private key)
- Seed encapsulation / decapsulation
"""

from .trapdoor import (
    TrapdoorKeyPair,
    generate_keypair,
    encapsulate,
    decapsulate,
    sha512,
)

__all__ = [
    'TrapdoorKeyPair',
    'generate_keypair',
    'encapsulate',
    'decapsulate',
    'sha512',
]
