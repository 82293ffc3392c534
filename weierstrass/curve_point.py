import dataclasses
import logging
import typing as t

from . import errors
from . import field_element


_LOG = logging.getLogger(__name__)

Coordinate = t.Union[field_element.FieldElement, int]


@dataclasses.dataclass(frozen=True)
class WeierstrassCurve:
    """
    The curve y^2 = x^3 + a*x + b over a prime field.

    When tangent_doubling is False, adding two affine points with equal
    x-coordinates always yields the identity, including a point added to
    itself.
    """

    a: field_element.FieldElement
    b: field_element.FieldElement
    field: field_element.PrimeField
    tangent_doubling: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", self.field.element(self.a))
        object.__setattr__(self, "b", self.field.element(self.b))

        _LOG.debug(
            "Created curve y^2 = x^3 + %dx + %d over F_%d",
            self.a.value,
            self.b.value,
            self.field.modulus,
        )
        if self.is_singular():
            _LOG.warning(
                "Curve y^2 = x^3 + %dx + %d over F_%d is singular",
                self.a.value,
                self.b.value,
                self.field.modulus,
            )

    @classmethod
    def from_coefficients(
        cls, a: int, b: int, modulus: int, tangent_doubling: bool = True
    ) -> "WeierstrassCurve":
        """Create a curve and its field from integer parameters."""
        field = field_element.PrimeField(modulus)
        return cls(field.element(a), field.element(b), field, tangent_doubling)

    @property
    def modulus(self) -> int:
        """Return the modulus of the underlying field."""
        return self.field.modulus

    def rhs(self, x: Coordinate) -> field_element.FieldElement:
        """Evaluate x^3 + a*x + b."""
        x = self.field.element(x)
        return x * x * x + self.a * x + self.b

    def is_singular(self) -> bool:
        """Return True if the discriminant 4a^3 + 27b^2 vanishes."""
        return (4 * self.a**3 + 27 * self.b**2).is_zero()

    def identity(self) -> "CurvePoint":
        """Return the point at infinity."""
        return CurvePoint(None, None, self)

    def affine(self, x: Coordinate, y: Coordinate) -> "CurvePoint":
        """Create an affine point without checking curve membership."""
        return CurvePoint(self.field.element(x), self.field.element(y), self)

    def point(self, x: Coordinate, y: Coordinate) -> "CurvePoint":
        """
        Create an affine point, checking that it lies on the curve.

        Args:
            x: x-coordinate
            y: y-coordinate

        Returns:
            The point (x, y)

        Raises:
            PointNotOnCurveError: If y^2 != x^3 + a*x + b
        """
        candidate = self.affine(x, y)
        if not self.contains(candidate):
            raise errors.PointNotOnCurveError(candidate.x.value, candidate.y.value)
        return candidate

    def contains(self, point: "CurvePoint") -> bool:
        """Check whether a point of this curve satisfies the curve equation."""
        if point.curve != self:
            return False
        if point.is_identity:
            return True
        return point.y * point.y == self.rhs(point.x)

    def points(self) -> list["CurvePoint"]:
        """
        Enumerate every point of the curve, identity first.

        Intended for small moduli: costs O(modulus) field operations.
        """
        roots: dict[int, list[field_element.FieldElement]] = {}
        for y in self.field.elements():
            roots.setdefault((y * y).value, []).append(y)

        found = [self.identity()]
        for x in self.field.elements():
            for y in roots.get(self.rhs(x).value, []):
                found.append(CurvePoint(x, y, self))
        return found


@dataclasses.dataclass(frozen=True)
class CurvePoint:
    """Represents either the point at infinity or an affine point of a curve."""

    x: field_element.FieldElement | None
    y: field_element.FieldElement | None
    curve: WeierstrassCurve = dataclasses.field(repr=False)

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ValueError("Both coordinates must be set, or neither for the identity")

    @property
    def is_identity(self) -> bool:
        """Return True for the point at infinity."""
        return self.x is None

    def _check_curve(self, other: "CurvePoint") -> None:
        if not isinstance(other, CurvePoint):
            raise TypeError("Can only combine CurvePoint with CurvePoint")
        if other.curve != self.curve:
            raise errors.FieldMismatchError("Cannot combine points of different curves")

    def negate(self) -> "CurvePoint":
        """Return the point reflected across the x-axis."""
        if self.is_identity:
            return self
        return CurvePoint(self.x, -self.y, self.curve)

    def add(self, other: "CurvePoint") -> "CurvePoint":
        """
        Add this point to another point.

        Args:
            other: Another point of the same curve

        Returns:
            Result of point addition

        Raises:
            FieldArithmeticError: If the slope denominator is not invertible
        """
        self._check_curve(other)

        if self.is_identity:
            return other
        if other.is_identity:
            return self

        x1, y1 = self.x, self.y
        x2, y2 = other.x, other.y

        if x1 == x2:
            if y1 != y2 or y1.is_zero() or not self.curve.tangent_doubling:
                # P + (-P), or a vertical tangent
                return self.curve.identity()
            s = (3 * x1 * x1 + self.curve.a) / (2 * y1)
        else:
            s = (y1 - y2) / (x1 - x2)

        x3 = s * s - x1 - x2
        y3 = s * (x1 - x3) - y1
        return CurvePoint(x3, y3, self.curve)

    def subtract(self, other: "CurvePoint") -> "CurvePoint":
        """Return self + (-other)."""
        self._check_curve(other)
        return self.add(other.negate())

    def __add__(self, other: "CurvePoint") -> "CurvePoint":
        return self.add(other)

    def __sub__(self, other: "CurvePoint") -> "CurvePoint":
        return self.subtract(other)

    def __neg__(self) -> "CurvePoint":
        return self.negate()

    def __repr__(self) -> str:
        """String representation of the point."""
        if self.is_identity:
            return "CurvePoint(identity)"
        return f"CurvePoint({self.x.value}, {self.y.value})"
