"""
Solving Path (per-block key schedule)

A solving path is the full set of per-layer parameters used to transform
one block. It is derived from (seed, block_index) alone, is never stored,
and is identical on every call with the same inputs.

For layer l the PRF is keyed with seed + block_index + l and the
`path` context, producing 6N + 256 bytes that are cut into regions:

    offset  0N  permutation   (swap-construct from identity)
    offset  1N  xor mask
    offset  2N  rotations     (1 + b mod 7)
    offset  3N  chaos seeds   (0 -> 1)
    offset  4N  multipliers   (0 -> 1)
    offset  5N  sbox          (swap-construct over 256 entries)

The legacy layout used by deployed builds reads the xor mask from the
permutation's region and shifts the remaining regions down by N.

Permutations and sboxes are built by pairwise swaps starting from the
identity, so they are bijections whatever bytes the PRF returns.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Iterator

from ..config import CipherConfig, DEFAULT_CONFIG, SBOX_SIZE
from ..core_crypto.prf import deterministic_bytes
from ..core_crypto.gf256 import gf_inv


@dataclass(frozen=True)
class PathLayer:
    """Parameters for one layer of the block transform."""
    permutation: Tuple[int, ...]    # position i reads block[permutation[i]]
    xor_mask: bytes
    rotation: Tuple[int, ...]       # bit rotations in [1, 7]
    chaos_seed: bytes               # never zero
    field_multiplier: bytes         # never zero
    sbox: bytes                     # bijection of 0..255

    @property
    def size(self) -> int:
        return len(self.permutation)

    def inverse_sbox(self) -> bytes:
        """Inverse substitution table: inverse_sbox()[sbox[x]] == x."""
        inv = bytearray(SBOX_SIZE)
        for i, v in enumerate(self.sbox):
            inv[v] = i
        return bytes(inv)

    def inverse_multipliers(self) -> bytes:
        """Field inverses of each multiplier."""
        return bytes(gf_inv(m) for m in self.field_multiplier)


@dataclass
class SolvingPath:
    """Ordered layers of a per-block key schedule."""
    layers: List[PathLayer] = field(default_factory=list)

    @property
    def block_size(self) -> int:
        return self.layers[0].size if self.layers else 0

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    # Per-attribute views, one entry per layer
    @property
    def permutations(self) -> List[Tuple[int, ...]]:
        return [layer.permutation for layer in self.layers]

    @property
    def xor_keys(self) -> List[bytes]:
        return [layer.xor_mask for layer in self.layers]

    @property
    def shifts(self) -> List[Tuple[int, ...]]:
        return [layer.rotation for layer in self.layers]

    @property
    def chaos_seeds(self) -> List[bytes]:
        return [layer.chaos_seed for layer in self.layers]

    @property
    def gf_multipliers(self) -> List[bytes]:
        return [layer.field_multiplier for layer in self.layers]

    @property
    def sboxes(self) -> List[bytes]:
        return [layer.sbox for layer in self.layers]

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[PathLayer]:
        return iter(self.layers)

    def __getitem__(self, index: int) -> PathLayer:
        return self.layers[index]


def swap_permutation(size: int, det: bytes, offset: int = 0) -> List[int]:
    """
    Build a permutation of range(size) by swapping from the identity.

    Index i swaps with det[offset + i % span] % size, where span is the
    number of bytes available from offset onward.

    Args:
        size: Length of the permutation
        det: Source bytes
        offset: Start of the region within det

    Returns:
        Bijection of range(size) as a list
    """
    span = len(det) - offset
    if span <= 0:
        raise ValueError("No source bytes for permutation")

    perm = list(range(size))
    for i in range(size):
        j = det[offset + i % span] % size
        perm[i], perm[j] = perm[j], perm[i]
    return perm


def _nonzero(region: bytes) -> bytes:
    return bytes(b if b != 0 else 1 for b in region)


def derive_layer(layer_seed: int, config: CipherConfig = DEFAULT_CONFIG) -> PathLayer:
    """Derive one layer's parameters from its own seed."""
    n = config.block_size
    det = deterministic_bytes(layer_seed, config.path_length, config.path_context)

    if config.legacy_layout:
        xor_off, rot_off, chaos_off, mult_off, sbox_off = 0, n, 2 * n, 3 * n, 4 * n
    else:
        xor_off, rot_off, chaos_off, mult_off, sbox_off = n, 2 * n, 3 * n, 4 * n, 5 * n

    return PathLayer(
        permutation=tuple(swap_permutation(n, det[:n])),
        xor_mask=det[xor_off:xor_off + n],
        rotation=tuple(1 + (b % 7) for b in det[rot_off:rot_off + n]),
        chaos_seed=_nonzero(det[chaos_off:chaos_off + n]),
        field_multiplier=_nonzero(det[mult_off:mult_off + n]),
        sbox=bytes(swap_permutation(SBOX_SIZE, det, sbox_off)),
    )


def generate_path(seed: int, block_index: int,
                  config: CipherConfig = DEFAULT_CONFIG) -> SolvingPath:
    """
    Generate the solving path for one block.

    Args:
        seed: Message seed (non-negative)
        block_index: Zero-based block position in the message
        config: Cipher parameters

    Returns:
        SolvingPath with config.layers layers
    """
    if seed < 0:
        raise ValueError("Seed must be non-negative")
    if block_index < 0:
        raise ValueError("Block index must be non-negative")

    base = seed + block_index
    return SolvingPath([derive_layer(base + l, config) for l in range(config.layers)])
