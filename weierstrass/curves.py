import dataclasses

from . import curve_point


@dataclasses.dataclass(frozen=True)
class CurveParameters:
    """Coefficients and modulus of y^2 = x^3 + a*x + b over F_modulus."""

    a: int
    b: int
    modulus: int


# Small textbook curves
CURVE_PARAMETERS: dict[str, CurveParameters] = {
    "toy97": CurveParameters(a=2, b=3, modulus=97),
    "f17": CurveParameters(a=2, b=2, modulus=17),
    "f23": CurveParameters(a=1, b=1, modulus=23),
    "f223": CurveParameters(a=0, b=7, modulus=223),
}


def get_curve(name: str, tangent_doubling: bool = True) -> curve_point.WeierstrassCurve:
    """
    Build a curve from its preset name.

    Args:
        name: Key of CURVE_PARAMETERS
        tangent_doubling: Whether P + P uses the tangent line

    Returns:
        The configured curve

    Raises:
        KeyError: If the name is unknown
    """
    try:
        params = CURVE_PARAMETERS[name]
    except KeyError as exc:
        known = ", ".join(sorted(CURVE_PARAMETERS))
        raise KeyError(f"Unknown curve {name!r}; expected one of: {known}") from exc

    return curve_point.WeierstrassCurve.from_coefficients(
        params.a, params.b, params.modulus, tangent_doubling=tangent_doubling
    )
