"""
MathMaze exception types.

All failures raised by the cipher derive from MathMazeError. The input
related ones also derive from ValueError so callers that already catch
ValueError keep working.
"""


class MathMazeError(Exception):
    """Base class for MathMaze failures."""


class InvalidFieldOperandError(MathMazeError, ValueError):
    """Attempted to invert the zero element of GF(256)."""


class InvalidPaddingError(MathMazeError, ValueError):
    """
    Decrypted padding length is outside [1, N].

    The ciphertext is corrupt or the seed/key does not match. MathMaze has
    no authentication, so this is the only integrity signal it gives.
    """


class MalformedCiphertextError(MathMazeError, ValueError):
    """Ciphertext framing is inconsistent with its length."""


class EntropyUnavailableError(MathMazeError, RuntimeError):
    """The secure random source could not supply bytes."""
