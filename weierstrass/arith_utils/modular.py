from .. import errors


# Element values live in a single unsigned word; add/mul intermediates
# fit in a double word.
WORD_BITS = 32
WORD_MAX = (1 << WORD_BITS) - 1

# Deterministic Miller-Rabin witnesses for every n < 4,759,123,141.
_PRIMALITY_WITNESSES = (2, 7, 61)


def mod_add(a: int, b: int, n: int) -> int:
    """Add two reduced values modulo n."""
    return (a + b) % n


def mod_mul(a: int, b: int, n: int) -> int:
    """Multiply two reduced values modulo n."""
    return (a * b) % n


def additive_inverse(a: int, n: int) -> int:
    """Return n - (a mod n), reduced so that the inverse of 0 is 0."""
    return (n - a % n) % n


def mod_sub(a: int, b: int, n: int) -> int:
    """
    Subtract two reduced values modulo n.

    When a < b the difference is taken through the additive inverse of b,
    so no intermediate is ever negative.

    Args:
        a: Minuend in [0, n)
        b: Subtrahend in [0, n)
        n: Modulus

    Returns:
        (a - b) mod n
    """
    if a >= b:
        return (a - b) % n
    return mod_add(a, additive_inverse(b, n), n)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Iterative extended Euclidean algorithm.

    Args:
        a: First non-negative integer
        b: Second non-negative integer

    Returns:
        Tuple (g, x, y) with a*x + b*y == g == gcd(a, b)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    return old_r, old_x, old_y


def multiplicative_inverse(a: int, n: int) -> int:
    """
    Compute the inverse of a modulo n with the extended Euclidean algorithm.

    Tracks the successive remainders of n and a together with the running
    coefficient of a. When the remainder reaches 0 the previous remainder is
    gcd(a, n); it must be 1 for the inverse to exist.

    Args:
        a: Value to invert
        n: Modulus

    Returns:
        The inverse of a, in [1, n)

    Raises:
        DivisionByZeroError: If a is congruent to 0
        NoMultiplicativeInverseError: If gcd(a, n) != 1
    """
    a = a % n
    if a == 0:
        raise errors.DivisionByZeroError(n)

    prev_rem, rem = n, a
    prev_coef, coef = 0, 1

    while rem != 0:
        quotient = prev_rem // rem
        prev_rem, rem = rem, prev_rem - quotient * rem
        prev_coef, coef = coef, prev_coef - quotient * coef

    if prev_rem != 1:
        raise errors.NoMultiplicativeInverseError(a, n, prev_rem)

    return prev_coef % n


def mod_div(a: int, b: int, n: int) -> int:
    """Divide a by b modulo n."""
    return mod_mul(a, multiplicative_inverse(b, n), n)


def mod_pow(a: int, e: int, n: int) -> int:
    """
    Raise a to the power e modulo n by square-and-multiply.

    The exponent is scanned from its least significant bit upwards. A
    negative exponent raises the inverse of a instead.

    Args:
        a: Base in [0, n)
        e: Exponent
        n: Modulus

    Returns:
        a**e mod n; always 0 in the trivial field n == 1

    Raises:
        DivisionByZeroError: If e < 0 and a is 0
        NoMultiplicativeInverseError: If e < 0 and a is not invertible
    """
    if n == 1:
        return 0
    if e < 0:
        a = multiplicative_inverse(a, n)
        e = -e

    result = 1
    square = a % n
    while e:
        if e & 1:
            result = mod_mul(result, square, n)
        square = mod_mul(square, square, n)
        e >>= 1

    return result


def is_probable_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test for word-sized n."""
    if n < 2:
        return False
    for small in (2, 3, 5, 7, 11, 13):
        if n % small == 0:
            return n == small

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for witness in _PRIMALITY_WITNESSES:
        x = mod_pow(witness % n, d, n)
        if x in (0, 1, n - 1):
            continue
        for _ in range(s - 1):
            x = mod_mul(x, x, n)
            if x == n - 1:
                break
        else:
            return False

    return True
