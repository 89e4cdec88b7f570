# Messaging Module
"""
Public-key messaging built on the trapdoor and the chained cipher:
- Fresh seed per message
- Seed encapsulation to the recipient's public key
- Chained maze encryption of the message

Message format: [encaps_len | encapsulation | envelope]
"""

from .hybrid import (
    CombinedCiphertext,
    generate_seed,
    encrypt,
    decrypt,
)

__all__ = [
    'CombinedCiphertext',
    'generate_seed',
    'encrypt',
    'decrypt',
]
