"""Count eggs from a coop display value."""


def egg_count(display_value: int) -> int:
    """Number of set bits in ``display_value``."""
    return bin(display_value).count("1")