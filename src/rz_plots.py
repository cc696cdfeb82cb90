# rz_plots.py
# Static matplotlib versions of the visualizer's views. Every function only calls the
# numeric modules, draws one figure, then saves it (when save is given) or shows it.
#
#   python src/rz_plots.py zeros --t-end 50 --iterations 300 --save out/zeros.png
#   python src/rz_plots.py staircase --x-max 500 --formula "x/(log(x)-1.08366)"

import os
import argparse
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import cm
from matplotlib.colors import Normalize

import rz_zeta as rz
import rz_primes as rp
import rz_explicit as rx
from rz_formula import evaluate_custom_formula
from rz_zeros import KNOWN_ZEROS

# ===================== Parameters =====================
X_MAX            = 100     # staircase range
SYNTH_X_LIMIT    = 50      # harmonic synthesis / derivative views
DECK_X_LIMIT     = 60
ERROR_X_LIMIT    = 200
ZERO_LABELS      = 3       # annotate gamma_1..gamma_3 on the zero hunter
CYAN, YELLOW, ROSE = "#22d3ee", "#facc15", "#f43f5e"
# ======================================================

def linear_grid(start, stop, steps):
    """steps+1 evenly spaced samples from start to stop inclusive."""
    return start + np.arange(steps + 1) * ((stop - start) / steps)

def _finish(fig, save=None):
    fig.tight_layout()
    if save:
        os.makedirs(os.path.dirname(save) or ".", exist_ok=True)
        fig.savefig(save, dpi=160)
        print(f"Saved -> {save}")
    else:
        plt.show()
    return fig

# ---------- zeta ----------
def plot_zero_hunter(t_start=rz.DEFAULT_T_START, t_end=rz.DEFAULT_T_END,
                     iterations=rz.DEFAULT_ITERATIONS, save=None):
    data = rz.critical_line_scan(t_start, t_end, iterations)
    fig, ax = plt.subplots(figsize=(9, 4.5))
    ax.plot(data["t"], data["magnitude"], color=CYAN, lw=2, label="|ζ(1/2 + it)|")
    ax.fill_between(data["t"], data["magnitude"], color=CYAN, alpha=0.1)
    ax.axhline(0, color="#64748b", ls="--", lw=1)
    for i, g in enumerate(KNOWN_ZEROS[:ZERO_LABELS]):
        if t_start <= g <= t_end:
            ax.annotate(f"γ{i+1}", xy=(g, 0), xytext=(g, 1.0), color=CYAN,
                        ha="center", arrowprops=dict(arrowstyle="->", color=CYAN))
    ax.set_xlabel("t  (imaginary part)")
    ax.set_ylabel("|ζ(s)|")
    ax.set_title(f"Zero hunter on the critical line  (N = {iterations} terms)")
    ax.legend(loc="upper right")
    return _finish(fig, save)

def plot_landscape(t_start=rz.DEFAULT_T_START, t_end=rz.DEFAULT_T_END,
                   iterations=rz.DEFAULT_ITERATIONS, save=None):
    data = rz.zeta_landscape(t_start, t_end, iterations)
    S, T = np.meshgrid(data["sigma"], data["t"])
    phase = np.nan_to_num(data["phase"])
    colors = cm.viridis(Normalize(-np.pi, np.pi)(phase))
    fig = plt.figure(figsize=(8, 7))
    ax = fig.add_subplot(projection="3d")
    ax.plot_surface(S, T, data["magnitude"], facecolors=colors,
                    rstride=1, cstride=1, linewidth=0, antialiased=False)
    ax.set_xlabel("Re(s)")
    ax.set_ylabel("Im(s)")
    ax.set_zlabel("|ζ(s)|")
    ax.set_title("Complex landscape (color = phase)")
    return _finish(fig, save)

def plot_rotation(n=2.0, sigma=1.0, t=2.0, save=None):
    data = rz.rotation_trace(n, sigma, t)
    px, py = data["point"]
    fig, ax = plt.subplots(figsize=(5.5, 5.5))
    ax.plot(data["x"], data["y"], ls="--", color="#6366f1", alpha=0.5, label="rotation trace")
    ax.plot([0, px], [0, py], marker="o", color="#6366f1", lw=3, label=f"{n}^s")
    r = data["magnitude"] * 1.2
    ax.set_xlim(-r, r); ax.set_ylim(-r, r)
    ax.set_aspect("equal")
    ax.axhline(0, color="#94a3b8", lw=0.5); ax.axvline(0, color="#94a3b8", lw=0.5)
    ax.set_title(f"n^s = {n}^({sigma} + {t}i)")
    ax.legend(loc="upper left")
    return _finish(fig, save)

def report_euler_balance(s=2.0, num_terms=100):
    r = rz.euler_balance(s, num_terms)
    print(f"\n--- Euler balance  s={s}  terms={num_terms} ---")
    print(f"Sum over integers:  {r['sum']:.8f}")
    print(f"Product over primes:{r['product']:.8f}")
    print(f"Difference:         {r['diff']:.2e}  ({r['status']})")
    if r["benchmark"] is not None:
        print(f"pi^2/6:             {r['benchmark']:.8f}")
    return r

# ---------- primes ----------
def plot_number_grid(limit=100, save=None):
    data = rp.number_grid(limit)
    marker = 4 if limit <= 1600 else 2
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.scatter(data["composites_x"], data["composites_y"], s=marker, c="#1e293b")
    ax.scatter(data["primes_x"], data["primes_y"], s=marker * 2, c=CYAN)
    ax.invert_yaxis()
    ax.set_axis_off()
    ax.set_title(f"Primes among the first {limit:,} integers")
    return _finish(fig, save)

def plot_staircase(x_max=X_MAX, formula=None, save=None):
    data = rp.prime_count_series(x_max)
    fig, ax = plt.subplots(figsize=(9, 5))
    ax.step(data["x"], data["pi_x"], where="post", color=CYAN, lw=2.5, label="π(x)")
    ax.plot(data["x"], data["gauss_approx"], ls="--", color=YELLOW, lw=2, label="x / ln x")
    if formula:
        res = evaluate_custom_formula(formula, data["x"])
        if res["error"]:
            print(f"Formula ignored: {res['error']}")
        elif res["values"]:
            fx, fy = zip(*res["values"])
            ax.plot(fx, fy, color=ROSE, lw=2, label=formula)
    ax.set_xlabel("x")
    ax.set_ylabel("count")
    ax.set_title("The prime staircase")
    ax.legend(loc="upper left")
    return _finish(fig, save)

# ---------- explicit formula ----------
def plot_error_term(x_limit=ERROR_X_LIMIT, num_zeros=len(KNOWN_ZEROS), save=None):
    data = rx.error_term_data(x_limit, num_zeros)
    fig, ax = plt.subplots(figsize=(9, 5))
    ax.step(data["x"], data["actual_error"], where="post", color=CYAN, lw=2, label="π(x) − Li(x)")
    ax.plot(data["x"], data["riemann_correction"], color=ROSE, lw=2,
            label=f"Riemann correction ({num_zeros} zeros)")
    ax.plot(data["x"], data["bounds_upper"], ls="--", color="#475569", lw=1, label="RH bound")
    ax.plot(data["x"], data["bounds_lower"], ls="--", color="#475569", lw=1)
    ax.fill_between(data["x"], data["bounds_lower"], data["bounds_upper"],
                    color="#475569", alpha=0.05)
    ax.axhline(0, color="#334155", lw=0.8)
    ax.set_xlabel("x")
    ax.set_ylabel("error")
    ax.set_title("The error term and its harmonics")
    ax.legend(loc="lower left")
    return _finish(fig, save)

def plot_harmonic_synthesis(num_harmonics=10, x_limit=SYNTH_X_LIMIT, steps=300, save=None):
    x = linear_grid(1.001, x_limit, steps)
    synth = rx.synthesize_psi(x, KNOWN_ZEROS, num_harmonics)
    k = synth["gammas"].size
    fig, (top, bottom) = plt.subplots(2, 1, figsize=(9, 7), sharex=True,
                                      gridspec_kw=dict(height_ratios=[3, 1]))
    top.step(x, rp.chebyshev_psi_series(x), where="post", color=CYAN, alpha=0.6, label="ψ(x)")
    top.plot(x, synth["synthesized"], color=ROSE, lw=2.5, label=f"synthesized, K = {k}")
    top.set_ylim(0, x_limit)
    top.set_ylabel("ψ(x)")
    top.set_title("Reconstructing the prime staircase")
    top.legend(loc="upper left")
    if k > 0:
        wave = rx.harmonic_contribution(x, synth["gammas"][-1])
        bottom.plot(x, wave, color="#fbbf24", lw=1.5, label=f"zero #{k}")
        bottom.fill_between(x, wave, color="#fbbf24", alpha=0.1)
        bottom.legend(loc="upper left")
    bottom.set_xlabel("x")
    return _finish(fig, save)

def plot_mixing_deck(active_mask=None, x_limit=DECK_X_LIMIT, steps=600, save=None):
    x = linear_grid(2.0, x_limit, steps)
    deck = rx.mixing_deck(x, active_mask)
    fig, ax = plt.subplots(figsize=(9, 5))
    for i, on in enumerate(deck["active"]):
        if on:
            ax.plot(x, deck["waves"][i], lw=0.8, alpha=0.3)
    ax.plot(x, deck["sum_wave"], color="black", lw=2.5, label="summed signal")
    ax.axhline(rx.PREDICTION_THRESHOLD, color="#fb7185", ls="--", lw=1.5, label="prediction threshold")
    hits = rx.prime_candidates(x, deck["sum_wave"])
    ax.set_xlabel("x")
    ax.set_title(f"Mixing deck: {deck['active_count']} / {len(deck['active'])} active "
                 f"({rx.resolution_label(deck['active_count'])} resolution)")
    ax.legend(loc="upper right")
    print(f"Peaks above threshold: {', '.join(f'{h:.1f}' for h in hits) or '(none)'}")
    return _finish(fig, save)

def plot_derivative_link(num_harmonics=10, x_limit=SYNTH_X_LIMIT, steps=800, save=None):
    x = linear_grid(1.01, x_limit, steps)
    synth = rx.synthesize_psi(x, KNOWN_ZEROS, num_harmonics)
    fig, (top, bottom) = plt.subplots(2, 1, figsize=(9, 7), sharex=True)
    top.plot(x, synth["synthesized"], color=ROSE, lw=2.5)
    top.set_ylim(0, x_limit)
    top.set_ylabel("accumulated count ψ")
    bottom.plot(x, synth["density"], color="black", lw=1.5)
    bottom.fill_between(x, synth["density"], alpha=0.05)
    bottom.set_ylim(-3, 5)
    bottom.axhline(0, color="#334155", lw=0.8)
    bottom.set_ylabel("density pulse")
    bottom.set_xlabel("x")
    fig.suptitle(f"Integral and derivative, K = {synth['gammas'].size}")
    return _finish(fig, save)

# ---------- CLI ----------
def _mask_from(text):
    if text is None:
        return None
    picked = {int(i) - 1 for i in text.split(",") if i.strip()}
    return [i in picked for i in range(rx.DECK_SIZE)]

VIEWS = {
    "grid":       lambda a: plot_number_grid(a.x_max, save=a.save),
    "euler":      lambda a: report_euler_balance(a.s, a.iterations),
    "twist":      lambda a: plot_rotation(a.n, a.s, a.t, save=a.save),
    "zeros":      lambda a: plot_zero_hunter(a.t_start, a.t_end, a.iterations, save=a.save),
    "landscape":  lambda a: plot_landscape(a.t_start, a.t_end, a.iterations, save=a.save),
    "staircase":  lambda a: plot_staircase(a.x_max, a.formula, save=a.save),
    "error":      lambda a: plot_error_term(a.x_max, a.zeros, save=a.save),
    "synthesis":  lambda a: plot_harmonic_synthesis(a.zeros, save=a.save),
    "deck":       lambda a: plot_mixing_deck(_mask_from(a.active), save=a.save),
    "derivative": lambda a: plot_derivative_link(a.zeros, save=a.save),
}

def build_parser():
    p = argparse.ArgumentParser(description="Riemann zeta / prime visualizer (static figures)")
    p.add_argument("view", choices=sorted(VIEWS))
    p.add_argument("--t-start", type=float, default=rz.DEFAULT_T_START)
    p.add_argument("--t-end", type=float, default=rz.DEFAULT_T_END)
    p.add_argument("--iterations", type=int, default=rz.DEFAULT_ITERATIONS,
                   help="eta terms (euler: number of series terms)")
    p.add_argument("--x-max", type=int, default=X_MAX)
    p.add_argument("--zeros", type=int, default=10, help="number of zeros / harmonics K")
    p.add_argument("--active", default=None, help="deck harmonics to switch on, e.g. 1,2,3")
    p.add_argument("--formula", default=None, help="custom curve in x for the staircase")
    p.add_argument("--s", type=float, default=2.0, help="real exponent (euler) or sigma (twist)")
    p.add_argument("--n", type=float, default=2.0)
    p.add_argument("--t", type=float, default=2.0)
    p.add_argument("--save", default=None, help="write PNG here instead of showing")
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    return VIEWS[args.view](args)

if __name__ == "__main__":
    main()
