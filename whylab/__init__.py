"""whylab: the ObfuscatedEncrypt byte pipeline and its analysis tooling.

Research / education only. Do NOT use in production.
"""

from .cipher import (
    InvalidArgument,
    InvalidKeySize,
    ObfuscatedEncrypt,
    PermutationBug,
    PipelineSpec,
    PipelineTrace,
    WhyCryptoError,
    encrypt,
    format_digest,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "InvalidKeySize",
    "ObfuscatedEncrypt",
    "PermutationBug",
    "PipelineSpec",
    "PipelineTrace",
    "WhyCryptoError",
    "encrypt",
    "format_digest",
]
