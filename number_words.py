from types import MappingProxyType

ONES = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)
TENS = (
    "",
    "ten",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
# Irregular names; checked before the tens/ones split.
EXCEPTIONS = MappingProxyType(
    {
        0: "zero",
        11: "eleven",
        12: "twelve",
        13: "thirteen",
        14: "fourteen",
        15: "fifteen",
        16: "sixteen",
        17: "seventeen",
        18: "eighteen",
        19: "nineteen",
    }
)
MAX_DIGITS = 2


class InvalidArgumentError(ValueError):
    pass


def _check_integer(number):
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidArgumentError(
            f"number must be an integer, got {type(number).__name__}."
        )


def digit_count(number):
    _check_integer(number)
    return len(str(abs(number)))


def _check_number(number):
    _check_integer(number)
    if number < 0:
        raise InvalidArgumentError(f"number must not be negative, got {number}.")
    if digit_count(number) > MAX_DIGITS:
        raise InvalidArgumentError(
            f"number must have at most {MAX_DIGITS} digits, got {number}."
        )


def number_to_words(number, capitalize=False):
    """Spell out an integer in [0, 99], e.g. 42 -> "forty-two"."""
    _check_number(number)
    if number in EXCEPTIONS:
        words = EXCEPTIONS[number]
    elif digit_count(number) == 1:
        words = ONES[number]
    else:
        tens, ones = divmod(number, 10)
        if ones == 0:
            words = TENS[tens]
        else:
            words = f"{TENS[tens]}-{ONES[ones]}"
    if capitalize:
        words = words[0].upper() + words[1:]
    return words


def numbers_to_words(numbers, capitalize=False):
    return [number_to_words(number, capitalize=capitalize) for number in numbers]
