# rz_explicit.py
# Truncated explicit formula: rebuild psi(x) (and the pi(x) - Li(x) error) from a
# finite set of zeta zeros rho = 1/2 + i*gamma. Each zero contributes one harmonic
# in ln(x); summing more of them sharpens the prime staircase.

import math
import numpy as np

from rz_primes import prime_count_series, log_integral_series
from rz_zeros import KNOWN_ZEROS

LN_2PI = math.log(2.0 * math.pi)
DECK_SIZE = 10                # harmonics on the mixing deck
PREDICTION_THRESHOLD = 1.5    # pulse height read as "prime here"

def _select_gammas(zeros, active):
    """
    active: None (all), an int K (first K zeros) or an iterable of 0-based indices.
    Subsets are de-duplicated and kept in rank order; an index outside
    0..len(zeros)-1 raises ValueError.
    """
    if active is None:
        idx = range(len(zeros))
    elif isinstance(active, (int, np.integer)):
        idx = range(max(0, min(int(active), len(zeros))))
    else:
        n = len(zeros)
        active = [int(i) for i in active]
        bad = [i for i in active if not 0 <= i < n]
        if bad:
            raise ValueError(f"zero index out of range 0..{n - 1}: {bad[0]}")
        idx = sorted(set(active))
    return np.array([float(zeros[i]) for i in idx], dtype=float)

# ---------- psi synthesis ----------
def synthesize_psi(x_grid, zeros=KNOWN_ZEROS, active=None):
    """
    psi_synth(x) = x - ln(2 pi) - 2 sqrt(x) * sum_k sin(gamma_k ln x) / gamma_k

    Returns dict with
      x             : the grid as a float array
      synthesized   : psi_synth on the grid
      per_harmonic  : (K, len(x)) array, row k = sin(gamma_k ln x) / gamma_k
      density       : sum_k cos(gamma_k ln x) / sqrt(K)  (zeros when K == 0)
      gammas        : the ordinates actually used
    K = 0 leaves the smooth baseline x - ln(2 pi).
    """
    x = np.asarray(x_grid, dtype=float)
    g = _select_gammas(zeros, active)
    k = g.size
    with np.errstate(divide="ignore", invalid="ignore"):
        lnx = np.log(x)
        phase = np.outer(g, lnx)
        per = np.sin(phase) / g[:, None]
        synthesized = x - LN_2PI - 2.0 * np.sqrt(x) * per.sum(axis=0)
        if k > 0:
            density = np.cos(phase).sum(axis=0) / math.sqrt(k)
        else:
            density = np.zeros_like(x)
    return dict(x=x, synthesized=synthesized, per_harmonic=per,
                density=density, gammas=g)

def harmonic_contribution(x_grid, gamma):
    """The single-zero term -2 sqrt(x) sin(gamma ln x) / gamma, as added to psi."""
    x = np.asarray(x_grid, dtype=float)
    with np.errstate(invalid="ignore"):
        return -2.0 * np.sqrt(x) * np.sin(gamma * np.log(x)) / gamma

# ---------- mixing deck ----------
def default_deck_mask(size=DECK_SIZE, on=3):
    return [i < on for i in range(size)]

def mixing_deck(x_grid, active_mask=None, zeros=KNOWN_ZEROS[:DECK_SIZE]):
    """
    Interference demo: every deck zero's wave cos(gamma ln x), plus the sum over the
    switched-on ones normalized by 1/sqrt(active count).
    """
    if active_mask is None:
        active_mask = default_deck_mask(len(zeros))
    mask = np.zeros(len(zeros), dtype=bool)
    mask[:len(active_mask)] = np.asarray(active_mask, dtype=bool)[:len(zeros)]
    x = np.asarray(x_grid, dtype=float)
    with np.errstate(invalid="ignore"):
        waves = np.cos(np.outer(np.asarray(zeros, dtype=float), np.log(x)))
    synth = synthesize_psi(x, zeros, np.flatnonzero(mask))
    return dict(x=x, waves=waves, sum_wave=synth["density"],
                active=mask, active_count=int(mask.sum()))

def prime_candidates(x_grid, signal, threshold=PREDICTION_THRESHOLD):
    """x positions of local maxima of the pulse signal that clear the threshold."""
    x = np.asarray(x_grid, dtype=float)
    s = np.asarray(signal, dtype=float)
    if s.size < 3:
        return np.array([], dtype=float)
    peaks = (s[1:-1] > s[:-2]) & (s[1:-1] >= s[2:]) & (s[1:-1] > threshold)
    return x[np.where(peaks)[0] + 1]

def resolution_label(active_count):
    if active_count <= 0: return "silence"
    if active_count < 4: return "low"
    if active_count <= 8: return "medium"
    return "high"

# ---------- pi(x) - Li(x) ----------
def error_term_data(x_limit=200, num_zeros=50, zeros=KNOWN_ZEROS):
    """
    On x = 2..x_limit:
      pi_x, li           : prime count and offset Li(x)
      actual_error       : pi(x) - Li(x)
      riemann_correction : -(sqrt(x)/ln x) * (1 + 2 sum_k sin(gamma_k ln x)/gamma_k)
                           (the -Li(sqrt x)/2 drift plus the zero harmonics, Li(y) ~ y/ln y)
      bounds_upper/lower : +/- sqrt(x) ln(x) / (8 pi), Schoenfeld's bound under RH
    """
    x_limit = int(x_limit)
    if x_limit < 2:
        empty = np.array([], dtype=float)
        return dict(x=empty, pi_x=empty, li=empty, actual_error=empty,
                    riemann_correction=empty, bounds_upper=empty, bounds_lower=empty)
    series = prime_count_series(x_limit)
    x = series["x"][1:].astype(float)
    pi_x = series["pi_x"][1:].astype(float)
    li = log_integral_series(x)
    per = synthesize_psi(x, zeros, num_zeros)["per_harmonic"]
    root, lnx = np.sqrt(x), np.log(x)
    correction = -(root / lnx) * (1.0 + 2.0 * per.sum(axis=0))
    bound = root * lnx / (8.0 * math.pi)
    return dict(x=x, pi_x=pi_x, li=li, actual_error=pi_x - li,
                riemann_correction=correction,
                bounds_upper=bound, bounds_lower=-bound)

# ---------- one zero as a rotating phasor ----------
def phasor_wave(gamma, u, history=5.0, points=100):
    """
    With u = ln x, zero gamma spins a unit phasor at angle gamma*u; its shadow
    sin(gamma*u) over the trailing window [u - history, u] is the wave.
    """
    uu = (u - history) + np.arange(points + 1) * (history / points)
    angle = (gamma * u) % (2.0 * math.pi)
    return dict(u=uu, wave=np.sin(gamma * uu), angle=angle,
                phasor=(math.cos(angle), math.sin(angle)))
