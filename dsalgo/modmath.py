"""Modular arithmetic helpers: fast exponentiation, inverses and binomials."""

MOD = 1_000_000_007


def mod_pow(x: int, n: int, mod: int = MOD) -> int:
    """Return ``x ** n % mod`` by repeated squaring; non-positive ``n`` gives 1."""
    result = 1 % mod
    x %= mod
    while n > 0:
        if n & 1:
            result = result * x % mod
        x = x * x % mod
        n >>= 1
    return result


def mod_inverse(x: int, mod: int = MOD) -> int:
    """Return the multiplicative inverse of ``x`` modulo the prime ``mod``."""
    return mod_pow(x, mod - 2, mod)


def ncr(n: int, r: int, mod: int = MOD) -> int:
    """Return the binomial coefficient C(n, r) modulo the prime ``mod``."""
    if r < 0:
        raise ValueError("r must be non-negative")
    if r == 0:
        return 1
    if n < r:
        return 0
    result = 1
    for k in range(r):
        result = result * ((n - k) % mod) % mod
        result = result * mod_inverse(r - k, mod) % mod
    return result