"""Convert numbers into raindrop sounds."""

_SOUNDS = ((3, "Pling"), (5, "Plang"), (7, "Plong"))


def raindrops(number: int) -> str:
    """Sounds for the factors 3, 5 and 7 of ``number``, or the number itself."""
    sounds = "".join(sound for divisor, sound in _SOUNDS if number % divisor == 0)
    return sounds or str(number)