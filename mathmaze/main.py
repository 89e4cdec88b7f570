"""
MathMaze - Main Entry Point
Walks through a seed round trip and the trapdoor's observed behavior.
"""

import logging

from .errors import InvalidPaddingError
from .maze.chaining import encrypt_with_seed, decrypt_with_seed
from .messaging.hybrid import generate_seed
from .trapdoor.trapdoor import TrapdoorKeyPair, encapsulate, decapsulate


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def run_demo(message: bytes = b"Hello, MathMaze!") -> dict:
    """
    Run the demonstration and return what was observed.

    Returns:
        Dict with 'seed_round_trip' and 'trapdoor_recovers_seed' flags
    """
    print_header("SEED ROUND TRIP")
    seed = generate_seed()
    envelope = encrypt_with_seed(message, seed)
    recovered = decrypt_with_seed(envelope, seed)
    print(f"  Plaintext:  {message!r}")
    print(f"  Envelope:   {envelope.hex()[:64]}... ({len(envelope)} bytes)")
    print(f"  Decrypted:  {recovered!r}")

    print_header("TRAPDOOR")
    keys = TrapdoorKeyPair.generate()
    cipher, _ = encapsulate(seed, keys.public_key)
    unwrapped = decapsulate(cipher, keys.private_key)
    print(f"  Public key:      {keys.public_key.hex()[:32]}...")
    print(f"  Seed recovered:  {unwrapped == seed}")
    if unwrapped != seed:
        print("  Encapsulation and decapsulation hash different inputs;")
        print("  the unwrapped seed does not match.")
        try:
            decrypt_with_seed(envelope, unwrapped)
        except InvalidPaddingError:
            print("  Decrypting with the unwrapped seed: invalid padding")

    return {
        'seed_round_trip': recovered == message,
        'trapdoor_recovers_seed': unwrapped == seed,
    }


def main():
    """Main entry point for the MathMaze demo."""
    logging.basicConfig(level=logging.INFO)
    print("=" * 60)
    print("MathMaze Demonstration")
    print("=" * 60)
    run_demo()
    print("\n")


if __name__ == "__main__":
    main()
