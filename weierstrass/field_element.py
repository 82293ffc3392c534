import dataclasses
import logging
import typing as t

from . import errors
from .arith_utils import modular


_LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PrimeField:
    """
    The integers modulo a fixed modulus.

    A field is a shared, immutable context: every element stores a reference
    to the field it was built in, and binary operations require both
    operands to share it.
    """

    modulus: int

    def __post_init__(self) -> None:
        if isinstance(self.modulus, bool) or not isinstance(self.modulus, int):
            raise TypeError("Field modulus must be an integer")
        if self.modulus == 0:
            raise errors.ZeroModulusError()
        if self.modulus < 0:
            raise ValueError("Field modulus must be a positive integer")
        if self.modulus > modular.WORD_MAX:
            raise errors.ModulusTooLargeError(self.modulus, modular.WORD_BITS)

        _LOG.debug("Created field with modulus %d", self.modulus)
        if self.modulus > 1 and not modular.is_probable_prime(self.modulus):
            _LOG.warning(
                "Field modulus %d is not prime; division may fail with "
                "NoMultiplicativeInverseError",
                self.modulus,
            )

    def element(self, value: int) -> "FieldElement":
        """Create the element of this field congruent to value."""
        if isinstance(value, FieldElement):
            self._check_same(value)
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Field element value must be an integer")
        return FieldElement(value % self.modulus, self)

    def zero(self) -> "FieldElement":
        """Return the additive identity."""
        return FieldElement(0, self)

    def one(self) -> "FieldElement":
        """Return the multiplicative identity (0 in the trivial field)."""
        return FieldElement(1 % self.modulus, self)

    def elements(self) -> t.Iterator["FieldElement"]:
        """Iterate over every element of the field in increasing order."""
        for value in range(self.modulus):
            yield FieldElement(value, self)

    def is_prime(self) -> bool:
        """Return True if the modulus is prime, making every nonzero element invertible."""
        return modular.is_probable_prime(self.modulus)

    def _check_same(self, element: "FieldElement") -> None:
        if element.field.modulus != self.modulus:
            raise errors.FieldMismatchError(
                f"Element of modulus {element.field.modulus} used in field "
                f"of modulus {self.modulus}"
            )

    def __contains__(self, item: object) -> bool:
        return isinstance(item, FieldElement) and item.field.modulus == self.modulus

    def __len__(self) -> int:
        return self.modulus


@dataclasses.dataclass(frozen=True, eq=False)
class FieldElement:
    """Represents one residue class modulo the field's modulus."""

    _value: int
    _field: PrimeField

    def __post_init__(self) -> None:
        if not (0 <= self._value < self._field.modulus):
            raise ValueError("Field element value must be reduced modulo the field")

    @property
    def value(self) -> int:
        """Return the canonical value in [0, modulus)."""
        return self._value

    @property
    def field(self) -> PrimeField:
        """Return the field this element belongs to."""
        return self._field

    @property
    def modulus(self) -> int:
        """Return the modulus of the field."""
        return self._field.modulus

    def _coerce(self, other: object) -> "FieldElement":
        """Bring other into this element's field, or raise."""
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                raise errors.FieldMismatchError(
                    f"Cannot combine elements of modulus {self.modulus} "
                    f"and {other.modulus}"
                )
            return other
        return self._field.element(other)  # type: ignore[arg-type]

    def _new(self, value: int) -> "FieldElement":
        return FieldElement(value, self._field)

    def add(self, other: "FieldElement | int") -> "FieldElement":
        """Return self + other."""
        other = self._coerce(other)
        return self._new(modular.mod_add(self._value, other._value, self.modulus))

    def sub(self, other: "FieldElement | int") -> "FieldElement":
        """Return self - other."""
        other = self._coerce(other)
        return self._new(modular.mod_sub(self._value, other._value, self.modulus))

    def mul(self, other: "FieldElement | int") -> "FieldElement":
        """Return self * other."""
        other = self._coerce(other)
        return self._new(modular.mod_mul(self._value, other._value, self.modulus))

    def negate(self) -> "FieldElement":
        """Return the additive inverse."""
        return self._new(modular.additive_inverse(self._value, self.modulus))

    def inverse(self) -> "FieldElement":
        """
        Return the multiplicative inverse.

        Raises:
            DivisionByZeroError: If this is the zero element
            NoMultiplicativeInverseError: If the value is not coprime to the modulus
        """
        return self._new(modular.multiplicative_inverse(self._value, self.modulus))

    def divide(self, other: "FieldElement | int") -> "FieldElement":
        """
        Return self * other.inverse().

        Args:
            other: Divisor in the same field

        Returns:
            The quotient

        Raises:
            DivisionByZeroError: If the divisor is zero
            NoMultiplicativeInverseError: If the divisor shares a factor with the modulus
        """
        other = self._coerce(other)
        return self._new(modular.mod_div(self._value, other._value, self.modulus))

    def power(self, exponent: int) -> "FieldElement":
        """
        Raise to an integer power by square-and-multiply.

        Args:
            exponent: Any integer; negative exponents invert first

        Returns:
            self ** exponent (1 for exponent 0, except 0 in the trivial field)
        """
        if isinstance(exponent, FieldElement):
            exponent = exponent.value
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError("Exponent must be an integer")
        return self._new(modular.mod_pow(self._value, exponent, self.modulus))

    def is_zero(self) -> bool:
        """Return True for the additive identity."""
        return self._value == 0

    def __add__(self, other: "FieldElement | int") -> "FieldElement":
        return self.add(other)

    def __radd__(self, other: int) -> "FieldElement":
        return self._coerce(other).add(self)

    def __sub__(self, other: "FieldElement | int") -> "FieldElement":
        return self.sub(other)

    def __rsub__(self, other: int) -> "FieldElement":
        return self._coerce(other).sub(self)

    def __mul__(self, other: "FieldElement | int") -> "FieldElement":
        return self.mul(other)

    def __rmul__(self, other: int) -> "FieldElement":
        return self._coerce(other).mul(self)

    def __truediv__(self, other: "FieldElement | int") -> "FieldElement":
        return self.divide(other)

    def __rtruediv__(self, other: int) -> "FieldElement":
        return self._coerce(other).divide(self)

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.power(exponent)

    def __neg__(self) -> "FieldElement":
        return self.negate()

    def __eq__(self, other: object) -> bool:
        """Check equality with another FieldElement of the same field."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.modulus == other.modulus and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self.modulus))

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        """String representation of the element."""
        return f"FieldElement({self._value} mod {self.modulus})"


def field_element(value: int, modulus: int) -> FieldElement:
    """
    Create a field element from an arbitrary integer.

    Args:
        value: Any integer; it is reduced modulo the modulus
        modulus: Positive field modulus

    Returns:
        The canonical element congruent to value

    Raises:
        ZeroModulusError: If modulus is 0
    """
    return PrimeField(modulus).element(value)
