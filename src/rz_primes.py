# rz_primes.py
# Prime helpers: Eratosthenes sieve, pi(x) staircase with Gauss's x/ln x,
# offset logarithmic integral Li(x), von Mangoldt Lambda(n) and Chebyshev psi(x).

import math
import numpy as np

LI_STEPS = 500        # trapezoid subintervals for Li(x)
LI_CUTOFF = 1.5       # Li(x) = 0 at or below this (keeps away from t = 1)

class ComputationCancelled(RuntimeError):
    """Raised when a caller-supplied cancel() hook asks a long loop to stop."""

def _check_cancel(cancel):
    if cancel is not None and cancel():
        raise ComputationCancelled("computation cancelled by caller")

# ---------- sieve ----------
def sieve(nmax, cancel=None):
    """
    Boolean primality table for 0..nmax (True at primes).
    Negative sizes are a caller bug and raise ValueError.
    """
    if nmax < 0:
        raise ValueError(f"sieve size must be >= 0, got {nmax}")
    flags = np.ones(nmax + 1, dtype=bool)
    flags[:2] = False
    p = 2
    while p * p <= nmax:
        _check_cancel(cancel)
        if flags[p]:
            flags[p * p::p] = False
        p += 1
    return flags

def primes_up_to(m):
    if m < 2:
        return np.array([], dtype=int)
    return np.flatnonzero(sieve(m))

def is_prime(n):
    if n < 2: return False
    if n in (2, 3): return True
    if n % 2 == 0 or n % 3 == 0: return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True

# ---------- pi(x) and Gauss ----------
def prime_count_series(nmax):
    """
    Staircase pi(x) for x = 1..nmax plus Gauss's x/ln(x) (0 for x <= 1).
    nmax <= 0 gives empty series.
    """
    if nmax <= 0:
        return dict(x=np.array([], dtype=int),
                    pi_x=np.array([], dtype=int),
                    gauss_approx=np.array([], dtype=float))
    flags = sieve(nmax)
    x = np.arange(1, nmax + 1)
    pi_x = np.cumsum(flags)[1:]
    gauss = np.zeros(nmax, dtype=float)
    m = x > 1
    gauss[m] = x[m] / np.log(x[m])
    return dict(x=x, pi_x=pi_x, gauss_approx=gauss)

def number_grid(limit):
    """
    Lay 1..limit row by row on a grid sqrt(limit) wide and split the
    coordinates into primes and composites (1 counts as composite here).
    """
    if limit <= 0:
        empty = np.array([], dtype=int)
        return dict(size=0, primes_x=empty, primes_y=empty,
                    composites_x=empty, composites_y=empty)
    size = max(1, int(round(math.sqrt(limit))))
    n = np.arange(1, limit + 1)
    gx = (n - 1) % size
    gy = (n - 1) // size
    flags = sieve(limit)[1:]
    return dict(size=size,
                primes_x=gx[flags], primes_y=gy[flags],
                composites_x=gx[~flags], composites_y=gy[~flags])

# ---------- logarithmic integral ----------
def log_integral(x, steps=LI_STEPS):
    """
    Li(x) as the trapezoid integral of 1/ln(t) from 2 to x.
    Anchored at 2 (Gauss's offset form), not the principal value from 0.
    Below 2 the integral runs backwards, so 1.5 < x < 2 is negative.
    """
    if x <= LI_CUTOFF:
        return 0.0
    h = (x - 2.0) / steps
    if h == 0:
        return 0.0
    t = np.linspace(2.0, x, steps + 1)
    f = 1.0 / np.log(t)
    return float(h * (0.5 * f[0] + f[1:-1].sum() + 0.5 * f[-1]))

def log_integral_series(xs, steps=LI_STEPS):
    return np.array([log_integral(float(x), steps) for x in xs], dtype=float)

# ---------- von Mangoldt / Chebyshev psi ----------
def von_mangoldt(n):
    """Lambda(n) = ln p if n = p^k, else 0. Smallest factor found by trial division."""
    n = int(n)
    if n < 2:
        return 0.0
    p = n
    d = 2
    while d * d <= n:
        if n % d == 0:
            p = d
            break
        d += 1
    m = n
    while m % p == 0:
        m //= p
    return math.log(p) if m == 1 else 0.0

def chebyshev_psi(x, cancel=None):
    """
    psi(x) = sum of Lambda(n) over 2 <= n <= floor(x); 0 for x < 2.
    Cost grows like x*sqrt(x); fine for x in the low hundreds.
    """
    if x < 2:
        return 0.0
    total = 0.0
    for n in range(2, int(math.floor(x)) + 1):
        _check_cancel(cancel)
        total += von_mangoldt(n)
    return total

def mangoldt_table(nmax):
    """Lambda(n) for n = 0..nmax, built from one sieve (prime powers get ln p)."""
    lam = np.zeros(max(nmax, 0) + 1, dtype=float)
    for p in primes_up_to(nmax):
        p = int(p)
        w = math.log(p)
        q = p
        while q <= nmax:
            lam[q] = w
            q *= p
    return lam

def chebyshev_psi_series(xs):
    """psi at every point of xs, sharing one Lambda table across the grid."""
    xs = np.asarray(xs, dtype=float)
    if xs.size == 0:
        return np.array([], dtype=float)
    top = int(math.floor(max(float(xs.max()), 0.0)))
    cum = np.cumsum(mangoldt_table(top))
    out = np.zeros(xs.shape, dtype=float)
    m = xs >= 2
    out[m] = cum[np.floor(xs[m]).astype(int)]
    return out
