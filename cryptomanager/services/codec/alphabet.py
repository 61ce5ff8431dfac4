from dataclasses import dataclass

from cryptomanager.core.exceptions import OutOfBoundsError


@dataclass(frozen=True)
class AlphabetWindow:
    """
    Contiguous range of character codes accepted as cipher input and output.

    Both bounds are inclusive. Arithmetic over the window is done modulo
    ``range`` and re-offset by ``lower_code``.
    """

    lower: str = " "
    upper: str = "_"

    def __post_init__(self) -> None:
        if len(self.lower) != 1 or len(self.upper) != 1:
            raise ValueError("Window bounds must be single characters")
        if self.lower > self.upper:
            raise ValueError("Lower bound must not exceed upper bound")

    @property
    def lower_code(self) -> int:
        return ord(self.lower)

    @property
    def upper_code(self) -> int:
        return ord(self.upper)

    @property
    def range(self) -> int:
        return self.upper_code - self.lower_code + 1

    @property
    def characters(self) -> str:
        """All characters of the window in code order."""
        return "".join(chr(code) for code in range(self.lower_code, self.upper_code + 1))

    def contains(self, char: str) -> bool:
        return self.lower_code <= ord(char) <= self.upper_code

    def wrap(self, code: int) -> str:
        """Reduce an arbitrary code point into the window."""
        return chr((code - self.lower_code) % self.range + self.lower_code)


DEFAULT_WINDOW = AlphabetWindow()

LOWER_BOUND = DEFAULT_WINDOW.lower_code
UPPER_BOUND = DEFAULT_WINDOW.upper_code
RANGE = DEFAULT_WINDOW.range


def normalize_case(text: str) -> str:
    """
    Uppercase text one character at a time.

    Characters whose uppercase form is longer than one character (such as
    'ß') are left unchanged so that the output has the input's length.
    """
    result = []
    for char in text:
        upper = char.upper()
        result.append(upper if len(upper) == 1 else char)
    return "".join(result)


def is_in_bounds(text: str, window: AlphabetWindow = DEFAULT_WINDOW) -> bool:
    """Check that every character of text lies within the window."""
    return all(window.contains(char) for char in text)


def find_out_of_bounds(text: str, window: AlphabetWindow = DEFAULT_WINDOW) -> list[int]:
    """Positions of characters outside the window."""
    return [i for i, char in enumerate(text) if not window.contains(char)]


def require_in_bounds(text: str, window: AlphabetWindow = DEFAULT_WINDOW) -> None:
    """Raise OutOfBoundsError at the first character outside the window."""
    for position, char in enumerate(text):
        if not window.contains(char):
            raise OutOfBoundsError(position, char, window.lower, window.upper)
