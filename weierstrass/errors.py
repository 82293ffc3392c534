class ZeroModulusError(ValueError):
    """Raised when a field is asked to exist with modulus 0."""

    def __init__(self) -> None:
        super().__init__("Field modulus must be a positive integer, got 0")


class ModulusTooLargeError(ValueError):
    """Raised when a modulus does not fit into the element word."""

    def __init__(self, modulus: int, word_bits: int) -> None:
        self.modulus = modulus
        self.word_bits = word_bits
        super().__init__(
            f"Field modulus {modulus} does not fit in a {word_bits}-bit word"
        )


class FieldArithmeticError(ArithmeticError):
    """Base class for per-operation field arithmetic failures."""


class DivisionByZeroError(FieldArithmeticError, ZeroDivisionError):
    """Raised when dividing by (or inverting) the zero element."""

    def __init__(self, modulus: int) -> None:
        self.modulus = modulus
        super().__init__(f"Division by zero in field of modulus {modulus}")


class NoMultiplicativeInverseError(FieldArithmeticError):
    """
    Raised when a value shares a nontrivial factor with the modulus.

    Only reachable with a composite modulus.
    """

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(
            f"{value} has no multiplicative inverse modulo {modulus} "
            f"(gcd is {gcd})"
        )


class FieldMismatchError(ValueError):
    """Raised when operands belong to different fields or curves."""


class PointNotOnCurveError(ValueError):
    """Raised by validated point construction for an off-curve pair."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Point ({x}, {y}) is not on the curve")
