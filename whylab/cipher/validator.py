from __future__ import annotations

from typing import List, Tuple

from .block import AES_KEY_SIZES
from .components import PERM_MULTIPLIER, generate_sbox, is_permutation
from .errors import PermutationBug
from .spec import SUPPORTED_HASHES, PipelineSpec


def validate_spec(spec: PipelineSpec) -> Tuple[bool, List[str]]:
    errs: List[str] = []

    if spec.hash_name not in SUPPORTED_HASHES:
        errs.append(f"Unsupported hash: {spec.hash_name}")
        return False, errs

    digest = spec.digest_size

    # The derived AES key is hash(expanded_key), so its size is the digest size.
    if digest not in AES_KEY_SIZES:
        errs.append(f"{spec.hash_name} yields a {digest}-byte AES key; AES accepts {AES_KEY_SIZES}")

    # The permutation runs over the intermediate hash.
    if spec.strict_permutation and digest % PERM_MULTIPLIER == 0:
        errs.append(
            f"{spec.hash_name} digest length {digest} is a multiple of {PERM_MULTIPLIER}; "
            "permutation would lose bytes"
        )

    if spec.public_exponent % 2 == 0:
        errs.append("public_exponent should be odd")

    try:
        if not is_permutation(generate_sbox(spec.sbox_constant)):
            errs.append(f"S-box constant {spec.sbox_constant} does not yield a permutation")
    except PermutationBug as exc:
        errs.append(str(exc))

    return (len(errs) == 0), errs
