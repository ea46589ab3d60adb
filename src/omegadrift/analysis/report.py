"""Plain-text report of a FullAnalysis, in the banner style of the CLI."""

import numpy as np

from omegadrift.analysis.orchestrator import FullAnalysis
from omegadrift.core.constants import SECONDS_PER_YEAR

WIDTH = 70


def header(title: str) -> str:
    """Section header block."""
    return "\n".join(["", "=" * WIDTH, f"  {title}", "=" * WIDTH])


def format_years(seconds: float) -> str:
    if seconds == float('inf'):
        return "never"
    return f"{seconds / SECONDS_PER_YEAR:.3e} yr"


def trace_table(analysis: FullAnalysis, rows: int = 11) -> str:
    """Evenly decimated view of the trace (first and last samples always shown)."""
    df = analysis.trace.to_dataframe()
    n = len(df)
    stride = max(1, (n - 1) // max(rows - 1, 1))
    view = df.iloc[np.unique(np.r_[np.arange(0, n, stride), n - 1])]
    return view.to_string(index=False, float_format=lambda x: f"{x:.4e}")


def format_report(analysis: FullAnalysis) -> str:
    p = analysis.params
    s = analysis.summary
    fate = analysis.fate
    lines = [header("OMEGA DRIFT ANALYSIS")]

    lines.append(f"\nModel parameters:")
    lines.append(f"  H_ref = {p.hubble_now:.4e} s^-1")
    lines.append(f"  Omega_m = {p.omega_matter:.5g}, Omega_r = {p.omega_radiation:.5g}, "
                 f"Omega_L = {p.omega_lambda:.5g}, w = {p.dark_energy_w:.3g}")
    lines.append(f"  t_ref = {p.reference_time:.4e} s, omega_ref = {p.reference_omega:.4g}")

    lines.append(header(f"STATE AT t0 = {analysis.t0:.4e} s"))
    lines.append(f"  omega            = {s.omega:.6e}")
    lines.append(f"  d omega/dt       = {s.d_omega:.6e} s^-1")
    lines.append(f"  d2 omega/dt2     = {s.d2_omega:.6e} s^-2")
    lines.append(f"  normalized drift = {s.normalized_drift:.6e} s^-1")
    lines.append(f"  years to 1%      = {s.years_to_percent:.4e}")

    lines.append(header("EVOLUTION TRACE"))
    lines.append(f"  {len(analysis.trace)} samples, t in [{analysis.trace.t_start:.3e}, "
                 f"{analysis.trace.t_end:.3e}] s\n")
    lines.append(trace_table(analysis))

    lines.append(header("FATE"))
    lines.append(f"  Scenario:  {fate.scenario.value}")
    lines.append(f"  Stability: {fate.stability_score:.1f}")
    if fate.time_to_halt is not None:
        lines.append(f"  Halt in:   {format_years(fate.time_to_halt)}")
    lines.append(f"  {fate.description}")

    r = analysis.resonance
    tp = analysis.perception
    cd = analysis.clock_drift
    lines.append(header("PROJECTIONS"))
    lines.append(f"  Resonance breakdown: {'YES' if r.breakdown else 'NO'} "
                 f"(in {format_years(r.time_to_breakdown)})")
    lines.append(f"  Time perception after {analysis.perception_years:.3g} yr: "
                 f"omega ratio {tp.omega_ratio:.6f}, perception ratio {tp.perception_ratio:.6f}")
    lines.append(f"  Atomic clock drift over {analysis.clock_years:.3g} yr: "
                 f"ratio {cd.frequency_ratio:.15f} ({cd.percent_change:+.3e} %), "
                 f"{'detectable' if cd.detectable else 'below clock precision'}")
    return "\n".join(lines)


__all__ = ['format_report', 'trace_table', 'header']
