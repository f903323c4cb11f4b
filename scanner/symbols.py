"""Character classification for schematic cells."""

GEAR_SYMBOL = "*"


def is_digit(char: str) -> bool:
    """Return True if the character is one of '0' through '9'."""
    return len(char) == 1 and "0" <= char <= "9"


def is_gear_candidate(char: str) -> bool:
    """
    Return True if the character marks a possible gear.
    
    This only flags the '*' symbol. Whether it is an actual gear depends on
    its neighbors, which is decided in ``scanner.gears``.
    """
    return char == GEAR_SYMBOL
