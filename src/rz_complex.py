# rz_complex.py
# Minimal immutable complex value used by the zeta approximator.
# Division by zero yields an (inf, inf) sentinel instead of raising, so plots can clamp it.

import math
from typing import NamedTuple

INF = float("inf")

class Complex(NamedTuple):
    re: float
    im: float = 0.0

    @classmethod
    def from_polar(cls, r, theta):
        return cls(r * math.cos(theta), r * math.sin(theta))

    def __add__(self, other): return complex_add(self, other)
    def __sub__(self, other): return complex_sub(self, other)
    def __mul__(self, other): return complex_mul(self, other)
    def __truediv__(self, other): return complex_div(self, other)
    def __abs__(self): return complex_abs(self)
    def __complex__(self): return complex(self.re, self.im)

    def arg(self):
        return complex_arg(self)

    def is_finite(self):
        return math.isfinite(self.re) and math.isfinite(self.im)

# ---------- arithmetic ----------
def complex_add(a, b):
    return Complex(a.re + b.re, a.im + b.im)

def complex_sub(a, b):
    return Complex(a.re - b.re, a.im - b.im)

def complex_mul(a, b):
    return Complex(a.re * b.re - a.im * b.im,
                   a.re * b.im + a.im * b.re)

def complex_div(a, b):
    """
    a / b via the conjugate. When |b|^2 == 0 returns Complex(inf, inf):
    the overflow sentinel propagates to callers rather than raising.
    """
    den = b.re * b.re + b.im * b.im
    if den == 0:
        return Complex(INF, INF)
    return Complex((a.re * b.re + a.im * b.im) / den,
                   (a.im * b.re - a.re * b.im) / den)

def complex_abs(z):
    return math.sqrt(z.re * z.re + z.im * z.im)

def complex_arg(z):
    # atan2 range is (-pi, pi]
    return math.atan2(z.im, z.re)
