"""Input validation utilities for CLI commands."""

from src.provider import ALGORITHMS


def validate_algorithm(alg: str) -> str:
    """Validate and return an algorithm name. Raises ValueError if unsupported."""
    if not alg or not alg.strip():
        raise ValueError("Algorithm cannot be empty")
    alg = alg.strip()
    if alg not in ALGORITHMS:
        raise ValueError(
            f"Unsupported algorithm {alg!r}. Supported: {', '.join(sorted(ALGORITHMS))}"
        )
    return alg


def validate_modulus_length(bits: int) -> int:
    """Validate and return an RSA modulus length. Raises ValueError if invalid."""
    if bits < 2048:
        raise ValueError("RSA modulus length must be at least 2048 bits")
    if bits % 8:
        raise ValueError("RSA modulus length must be a multiple of 8")
    return bits
