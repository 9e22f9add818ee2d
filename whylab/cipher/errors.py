from __future__ import annotations


class WhyCryptoError(Exception):
    """Base class for every error raised by the pipeline."""


class InvalidArgument(WhyCryptoError, ValueError):
    """Input violates a stage precondition (empty key, empty data, ...)."""


class PermutationBug(WhyCryptoError):
    """A byte relocation or S-box turned out not to be a bijection."""


class InvalidKeySize(WhyCryptoError, ValueError):
    """Derived block-cipher key has a length AES does not accept."""
