import argparse
import dataclasses
import logging
import sys

from omegadrift.core.constants import SECONDS_PER_YEAR, T_NOW
from omegadrift.core.errors import OmegaDriftError
from omegadrift.core.parameters import PRESETS


def add_model_arguments(parser):
    """Preset selection plus one override flag per ModelParameters field."""
    parser.add_argument("--preset", choices=sorted(PRESETS), default="lambda_cdm",
                        help="Named parameter set to start from")
    for field in dataclasses.fields(PRESETS["lambda_cdm"]):
        flag = "--" + field.name.replace("_", "-")
        parser.add_argument(flag, dest=field.name, type=float, default=None,
                            help=f"Override {field.name}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def params_from_args(args):
    overrides = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(PRESETS[args.preset])
        if getattr(args, field.name) is not None
    }
    return PRESETS[args.preset].replace(**overrides)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="omegadrift",
        description="Omega Drift: evolution and fate of the fundamental frequency"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available modules")

    # Subcommand: simulate (Evolution trace + fate)
    parser_sim = subparsers.add_parser("simulate", help="Sample omega(t) and classify its fate")
    parser_sim.add_argument("--t-start", type=float, default=1e-32 * T_NOW, help="First sample time (s)")
    parser_sim.add_argument("--t-end", type=float, default=1e3 * T_NOW, help="Last sample time (s)")
    parser_sim.add_argument("--steps", type=int, default=1000, help="Number of log intervals")
    add_model_arguments(parser_sim)

    # Subcommand: analyze (Full analysis report)
    parser_an = subparsers.add_parser("analyze", help="Run the full analysis at t0")
    parser_an.add_argument("--t0", type=float, default=T_NOW, help="Present epoch (s)")
    parser_an.add_argument("--plot", default=None, help="Save the evolution figure to this path")
    add_model_arguments(parser_an)

    # Subcommand: project (Projections only)
    parser_proj = subparsers.add_parser("project", help="Projections from t0 over a span of years")
    parser_proj.add_argument("--t0", type=float, default=T_NOW, help="Present epoch (s)")
    parser_proj.add_argument("--years", type=float, default=1.0, help="Projection span (yr)")
    add_model_arguments(parser_proj)

    return parser


def run_simulate(args):
    from omegadrift.analysis.orchestrator import AnalysisOrchestrator
    print("[SIM] Sampling omega(t)...")
    engine = AnalysisOrchestrator(params_from_args(args))
    trace = engine.simulate(args.t_start, args.t_end, args.steps)
    fate = engine.predict_fate(trace)
    last = trace.terminal
    print(f"  {len(trace)} samples, t in [{trace.t_start:.3e}, {trace.t_end:.3e}] s")
    print(f"  Terminal: omega = {last.omega:.6e}, d omega/dt = {last.d_omega:.6e}, "
          f"d2 omega/dt2 = {last.d2_omega:.6e}")
    print(f"\n[FATE] {fate.scenario.value} (stability {fate.stability_score:.1f})")
    if fate.time_to_halt is not None:
        print(f"  Halt in {fate.time_to_halt / SECONDS_PER_YEAR:.3e} yr")
    print(f"  {fate.description}")


def run_analyze(args):
    from omegadrift.analysis.orchestrator import AnalysisOrchestrator
    from omegadrift.analysis.report import format_report
    print("[LAUNCH] Running full analysis...")
    analysis = AnalysisOrchestrator(params_from_args(args)).full_analysis(args.t0)
    print(format_report(analysis))
    if args.plot:
        from omegadrift.visuals.drift_visuals import plot_evolution
        plot_evolution(analysis.trace, analysis.fate, save_path=args.plot)


def run_project(args):
    from omegadrift.analysis.projections import ProjectionCalculator
    from omegadrift.cosmology.expansion import CosmologyModel
    calc = ProjectionCalculator(CosmologyModel(params_from_args(args)))
    resonance = calc.resonance_breakdown(args.t0)
    perception = calc.time_perception(args.t0, args.years)
    clock = calc.atomic_clock_drift(args.t0, args.years)

    print(f"[OBS] Projections from t0 = {args.t0:.4e} s over {args.years:g} yr")
    if resonance.breakdown:
        print(f"  Resonance breakdown in {resonance.time_to_breakdown / SECONDS_PER_YEAR:.3e} yr")
    else:
        print("  Resonance breakdown: never (drift negligible)")
    print(f"  Perception ratio: {perception.perception_ratio:.12f}")
    print(f"  Clock frequency ratio: {clock.frequency_ratio:.15f} "
          f"({clock.percent_change:+.3e} %) {'[DETECTABLE]' if clock.detectable else '[below precision]'}")


COMMANDS = {
    "simulate": run_simulate,
    "analyze": run_analyze,
    "project": run_project,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        COMMANDS[args.command](args)
    except OmegaDriftError as e:
        print(f"[ERROR] {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
