#!/usr/bin/env python3
"""
Omega Drift Visualizations

Four-panel summary of an EvolutionTrace on a logarithmic time axis:
    1. Scale factor a(t)
    2. omega(t)
    3. |d omega/dt|  (colour marks the sign)
    4. d^2 omega/dt^2 (symmetric log)
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from omegadrift.core.constants import SECONDS_PER_YEAR
from omegadrift.evolution.sampler import EvolutionTrace
from omegadrift.evolution.fate import FatePrediction

# Set publication-quality defaults
plt.rcParams.update({
    'font.family': 'serif',
    'font.size': 11,
    'axes.labelsize': 12,
    'axes.titlesize': 13,
    'legend.fontsize': 10,
    'savefig.dpi': 200,
    'savefig.bbox': 'tight',
    'axes.grid': True,
    'grid.alpha': 0.3,
})

COLORS = {
    'scale': '#2166ac',      # Blue
    'omega': '#b2182b',      # Red
    'rising': '#1b9e77',     # Teal (d omega > 0)
    'falling': '#d95f02',    # Orange (d omega < 0)
    'curvature': '#636363',  # Gray
}


def plot_evolution(trace: EvolutionTrace,
                   fate: Optional[FatePrediction] = None,
                   save_path: Optional[str] = None) -> plt.Figure:
    """
    Plot the evolution of omega and its derivatives.

    Args:
        trace: Trace to draw
        fate: Optional prediction shown in the figure title
        save_path: Write the figure here when given

    Returns:
        The matplotlib Figure
    """
    t_years = trace.times / SECONDS_PER_YEAR
    d_omega = trace.d_omegas

    fig, axes = plt.subplots(2, 2, figsize=(12, 9), sharex=True)
    ax_a, ax_w, ax_d1, ax_d2 = axes.ravel()

    ax_a.loglog(t_years, trace.scale_factors, color=COLORS['scale'], linewidth=2)
    ax_a.axhline(1.0, color='k', linestyle=':', linewidth=1, label='a = 1 (reference epoch)')
    ax_a.set_ylabel('Scale factor a(t)')
    ax_a.legend(loc='upper left')

    ax_w.loglog(t_years, trace.omegas, color=COLORS['omega'], linewidth=2)
    ax_w.set_ylabel(r'$\omega(t)$')

    rising = d_omega > 0
    falling = d_omega < 0
    if rising.any():
        ax_d1.loglog(t_years[rising], d_omega[rising], '.', markersize=3,
                     color=COLORS['rising'], label=r'$d\omega/dt > 0$')
    if falling.any():
        ax_d1.loglog(t_years[falling], -d_omega[falling], '.', markersize=3,
                     color=COLORS['falling'], label=r'$d\omega/dt < 0$')
    ax_d1.set_xscale('log')
    ax_d1.set_ylabel(r'$|d\omega/dt|$ (s$^{-1}$)')
    ax_d1.set_xlabel('t (yr)')
    if rising.any() or falling.any():
        ax_d1.legend(loc='upper right')

    d2 = trace.d2_omegas
    nonzero = np.abs(d2[d2 != 0])
    linthresh = nonzero.min() if nonzero.size else 1.0
    ax_d2.plot(t_years, d2, color=COLORS['curvature'], linewidth=1.5)
    ax_d2.set_xscale('log')
    ax_d2.set_yscale('symlog', linthresh=linthresh)
    ax_d2.set_ylabel(r'$d^2\omega/dt^2$ (s$^{-2}$)')
    ax_d2.set_xlabel('t (yr)')

    title = 'Evolution of the fundamental frequency'
    if fate is not None:
        title += f'\nFate: {fate.scenario.value} (stability {fate.stability_score:.1f})'
    fig.suptitle(title)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Saved evolution plot to: {save_path}")

    return fig


__all__ = ['plot_evolution', 'COLORS']
