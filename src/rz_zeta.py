# rz_zeta.py
# Riemann zeta via the alternating Dirichlet eta series:
#   zeta(s) = eta(s) / (1 - 2^(1-s)),  eta(s) = sum_{n<=N} (-1)^(n-1) n^(-s)
# Scalar version on Complex values, plus numpy grids for line scans and the sigma/t landscape.

import math
import numpy as np

from rz_complex import Complex, complex_div
from rz_primes import primes_up_to

# ===================== Defaults =====================
DEFAULT_ITERATIONS = 150     # eta terms
DEFAULT_T_START    = 0.0
DEFAULT_T_END      = 30.0
SCAN_STEPS         = 400     # samples along a vertical line
MAGNITUDE_CEILING  = 10.0    # display cap near the pole at s = 1
LN2 = math.log(2.0)
# ====================================================

# ---------- scalar ----------
def zeta_eta(s, iterations):
    """
    Partial eta sum. n^(-s) = n^(-sigma) * (cos(t ln n) - i sin(t ln n)).
    iterations <= 0 is an empty sum.
    """
    sigma, t = s.re, s.im
    re = im = 0.0
    for n in range(1, int(iterations) + 1):
        mag = float(n) ** (-sigma)
        ang = t * math.log(n)
        sign = 1.0 if n % 2 == 1 else -1.0
        re += sign * mag * math.cos(ang)
        im -= sign * mag * math.sin(ang)
    return Complex(re, im)

def zeta(s, iterations=DEFAULT_ITERATIONS):
    """
    zeta(s) ~ eta(s) / (1 - 2^(1-s)) with 2^(1-s) = 2^(1-sigma) (cos(t ln 2) - i sin(t ln 2)).
    At s = 1 the denominator vanishes and the (inf, inf) sentinel comes back.
    """
    eta = zeta_eta(s, iterations)
    scale = 2.0 ** (1.0 - s.re)
    ang = s.im * LN2
    denom = Complex(1.0 - scale * math.cos(ang), scale * math.sin(ang))
    return complex_div(eta, denom)

# ---------- vectorized ----------
def zeta_array(sigma, t, iterations=DEFAULT_ITERATIONS):
    """
    Same approximation evaluated over broadcast arrays of sigma and t.
    Returns (re, im); points where the denominator vanishes get (inf, inf).
    """
    sigma, t = np.broadcast_arrays(np.asarray(sigma, dtype=float),
                                   np.asarray(t, dtype=float))
    eta_re = np.zeros(sigma.shape)
    eta_im = np.zeros(sigma.shape)
    for n in range(1, int(iterations) + 1):
        mag = np.power(float(n), -sigma)
        ang = t * math.log(n)
        sign = 1.0 if n % 2 == 1 else -1.0
        eta_re += sign * mag * np.cos(ang)
        eta_im -= sign * mag * np.sin(ang)

    scale = np.power(2.0, 1.0 - sigma)
    d_re = 1.0 - scale * np.cos(t * LN2)
    d_im = scale * np.sin(t * LN2)
    den = d_re * d_re + d_im * d_im
    pole = den == 0
    with np.errstate(divide="ignore", invalid="ignore"):
        re = (eta_re * d_re + eta_im * d_im) / den
        im = (eta_im * d_re - eta_re * d_im) / den
    return np.where(pole, np.inf, re), np.where(pole, np.inf, im)

def clamp_magnitude(values, ceiling=MAGNITUDE_CEILING):
    """Cap |zeta| for display; inf/nan samples are pinned to the ceiling."""
    arr = np.asarray(values, dtype=float)
    return np.where(np.isfinite(arr), np.minimum(arr, ceiling), ceiling)

def critical_line_scan(t_start=DEFAULT_T_START, t_end=DEFAULT_T_END,
                       iterations=DEFAULT_ITERATIONS, steps=SCAN_STEPS, sigma=0.5):
    """
    Sample zeta(sigma + it) on steps+1 evenly spaced t in [t_start, t_end].
    Dips of the magnitude to ~0 on sigma = 1/2 mark the non-trivial zeros.
    """
    if steps <= 0:
        empty = np.array([], dtype=float)
        return dict(t=empty, re=empty, im=empty, magnitude=empty, phase=empty)
    t = t_start + np.arange(steps + 1) * ((t_end - t_start) / steps)
    re, im = zeta_array(sigma, t, iterations)
    return dict(t=t, re=re, im=im,
                magnitude=np.hypot(re, im),
                phase=np.arctan2(im, re))

def zeta_landscape(t_start=DEFAULT_T_START, t_end=DEFAULT_T_END,
                   iterations=DEFAULT_ITERATIONS,
                   sigma_start=0.0, sigma_end=1.2, sigma_steps=40, t_steps=40,
                   ceiling=MAGNITUDE_CEILING):
    """
    |zeta| and arg(zeta) on a (t, sigma) grid; rows follow t, columns follow sigma.
    Magnitude is clamped so the pole at s = 1 does not flatten the rest of the surface.
    """
    sig = np.linspace(sigma_start, sigma_end, sigma_steps + 1)
    tv = np.linspace(t_start, t_end, t_steps + 1)
    S, T = np.meshgrid(sig, tv)
    re, im = zeta_array(S, T, iterations)
    with np.errstate(invalid="ignore"):
        mag = np.hypot(re, im)
        phase = np.arctan2(im, re)
    return dict(sigma=sig, t=tv,
                magnitude=clamp_magnitude(mag, ceiling),
                phase=phase)

# ---------- Euler's sum = product ----------
def balance_label(diff):
    if diff < 1e-5: return "balanced"
    if diff < 1e-2: return "converging"
    return "out of sync"

def euler_balance(s, num_terms, prime_limit=500):
    """
    Compare sum_{n<=num_terms} n^-s with prod_p (1 - p^-s)^-1 over the first
    num_terms // 2 primes below prime_limit (real s > 1).
    """
    s = float(s)
    if s <= 0:
        raise ValueError(f"Euler product needs real s > 0, got {s}")
    total = 0.0
    sum_terms = []
    for n in range(1, int(num_terms) + 1):
        term = float(n) ** (-s)
        total += term
        if n <= 5: sum_terms.append((n, term))

    product = 1.0
    product_terms = []
    for i, p in enumerate(primes_up_to(prime_limit)[:max(int(num_terms), 0) // 2]):
        factor = 1.0 / (1.0 - float(p) ** (-s))
        product *= factor
        if i <= 4: product_terms.append((int(p), factor))

    diff = abs(total - product)
    return dict(sum=total, product=product, diff=diff,
                sum_terms=sum_terms, product_terms=product_terms,
                benchmark=(math.pi ** 2 / 6) if s == 2 else None,
                status=balance_label(diff))

# ---------- n^s as a rotation ----------
def rotation_trace(n, sigma, t, steps=200):
    """
    n^(sigma+it) = n^sigma * e^(i t ln n): a point on the circle of radius n^sigma.
    The trace sweeps tau from 0 to t, starting on the positive real axis.
    """
    ln_n = math.log(n)
    magnitude = float(n) ** sigma
    angle = t * ln_n
    tau = np.linspace(0.0, t, steps + 1)
    return dict(x=magnitude * np.cos(tau * ln_n),
                y=magnitude * np.sin(tau * ln_n),
                magnitude=magnitude, angle=angle,
                point=(magnitude * math.cos(angle), magnitude * math.sin(angle)))
