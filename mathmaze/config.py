"""
MathMaze Configuration

Named constants for every fixed parameter of the cipher, plus the
CipherConfig bundle passed through the key schedule, the block transform
and the chaining mode.

The key-schedule layout depends on these values, so changing any of them
changes every derived permutation, mask and substitution box. Only the
block size is meant to be overridden by callers, and the same value must
be used for encryption and decryption.
"""

from dataclasses import dataclass, replace


# Block / schedule geometry
DEFAULT_BLOCK_SIZE = 16     # N, bytes per block
LAYERS = 4                  # Layers per solving path
CHAOS_ITERATIONS = 5        # Chaos map iterations per byte per layer
SBOX_SIZE = 256

# Key material sizes
SEED_SIZE = 32              # Fresh symmetric seed entropy (bytes)
PRIVATE_KEY_SIZE = 32       # Trapdoor private key
PUBLIC_KEY_SIZE = 64        # SHA-512 digest of the private key
LENGTH_PREFIX_SIZE = 4      # Encapsulation length prefix (little-endian)

# PRF context labels
PATH_CONTEXT = "path"
OTP_CONTEXT = "OTP"

# Labels used by the deployed MathMaze builds
LEGACY_PATH_CONTEXT = "MathMazeUltraPath"
LEGACY_OTP_CONTEXT = "MathMazeUltraOTP"


@dataclass(frozen=True)
class CipherConfig:
    """
    Parameters shared by every stage of the cipher.

    Attributes:
        block_size: Bytes per block (N). Must fit the padding byte, so 1..255.
        layers: Number of layers in each solving path.
        chaos_iterations: Iterations of the chaos map per layer.
        path_context: PRF label for solving-path derivation.
        otp_context: PRF label for per-block one-time masks.
        legacy_layout: Use the deployed region layout, where the XOR mask
            re-reads the permutation bytes and the sbox region starts at 4N.
    """
    block_size: int = DEFAULT_BLOCK_SIZE
    layers: int = LAYERS
    chaos_iterations: int = CHAOS_ITERATIONS
    path_context: str = PATH_CONTEXT
    otp_context: str = OTP_CONTEXT
    legacy_layout: bool = False

    def __post_init__(self):
        if not 1 <= self.block_size <= 255:
            raise ValueError("Block size must be between 1 and 255")
        if self.layers < 1:
            raise ValueError("At least one layer required")
        if self.chaos_iterations < 0:
            raise ValueError("Chaos iterations must be non-negative")

    @property
    def path_length(self) -> int:
        """PRF bytes drawn per layer of a solving path."""
        return self.block_size * 6 + SBOX_SIZE

    def with_block_size(self, block_size: int) -> 'CipherConfig':
        """Copy of this config with a different block size."""
        return replace(self, block_size=block_size)

    @classmethod
    def legacy(cls, block_size: int = DEFAULT_BLOCK_SIZE) -> 'CipherConfig':
        """Config that reproduces the deployed MathMaze derivation exactly."""
        return cls(
            block_size=block_size,
            path_context=LEGACY_PATH_CONTEXT,
            otp_context=LEGACY_OTP_CONTEXT,
            legacy_layout=True,
        )


DEFAULT_CONFIG = CipherConfig()
