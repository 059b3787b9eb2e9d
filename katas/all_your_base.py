"""Convert digit sequences between numeric bases."""


class BaseConversionError(ValueError):
    """Base class for conversion failures."""


class InvalidInputBaseError(BaseConversionError):
    """The input base is below 2."""


class InvalidOutputBaseError(BaseConversionError):
    """The output base is below 2."""


class InvalidDigitError(BaseConversionError):
    """A digit is not valid in the input base."""

    def __init__(self, digit: int) -> None:
        super().__init__(f"invalid digit: {digit}")
        self.digit = digit


def convert(digits, from_base: int, to_base: int) -> list[int]:
    """Convert ``digits`` written in ``from_base`` into digits in ``to_base``."""
    if from_base < 2:
        raise InvalidInputBaseError("input base must be at least 2")
    if to_base < 2:
        raise InvalidOutputBaseError("output base must be at least 2")

    value = 0
    for digit in digits:
        if digit >= from_base:
            raise InvalidDigitError(digit)
        value = value * from_base + digit

    result = []
    while True:
        value, remainder = divmod(value, to_base)
        result.append(remainder)
        if value == 0:
            return result[::-1]