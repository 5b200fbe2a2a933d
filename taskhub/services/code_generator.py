"""Random short code generation."""

import random
import string
from typing import Callable

ALPHABET = string.ascii_letters + string.digits

CodeGenerator = Callable[[int], str]


def generate_short_code(length: int, alphabet: str = ALPHABET) -> str:
    """
    Generate a random short code of the given length.

    Each character is drawn independently and uniformly from ``alphabet``.
    Not suitable where codes must be unguessable; uniqueness is enforced
    by the caller.

    Args:
        length: Number of characters in the code
        alphabet: Characters to draw from

    Returns:
        str: A random short code

    Raises:
        ValueError: If length is not positive or the alphabet is empty
    """
    if length < 1:
        raise ValueError(f"Short code length must be positive, got {length}")
    if not alphabet:
        raise ValueError("Short code alphabet must not be empty")
    return "".join(random.choices(alphabet, k=length))
