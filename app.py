#!/usr/bin/env python3
"""
SCMR Coil — closed-form calculator for wireless power transfer coils.

Usage:
    python app.py compute                       # "wire" profile
    python app.py compute bigwire               # named profile
    python app.py compute RC N R [PITCH [CAP]]  # explicit geometry (SI units)
    python app.py profiles                      # list profiles
    python app.py sweep                         # Q over frequency
    python app.py design -f 13.56 -n 5          # wire/loop radius for a max-Q frequency
"""

import sys
import json
import argparse

from scmr_coil.errors import GeometryDomainError, InvalidArgument
from scmr_coil.utils.log import configure_logging


def _parse_positional(values: list[str]) -> list:
    """Profile name on its own, otherwise numbers."""
    if len(values) == 1:
        try:
            return [float(values[0])]
        except ValueError:
            return [values[0]]
    try:
        return [float(v) for v in values]
    except ValueError as exc:
        raise InvalidArgument(f"Geometry arguments must be numbers: {exc}") from exc


def _named_fields(args) -> dict:
    from scmr_coil.utils.units import awg_to_radius, pf

    if args.rc is not None and args.awg is not None:
        raise InvalidArgument("Give the wire either as --rc or as --awg, not both")
    fields = {
        "profile": args.profile,
        "cross_section_radius": awg_to_radius(args.awg) if args.awg is not None else args.rc,
        "turn_count": args.turns,
        "loop_radius": args.radius,
        "pitch": args.pitch,
        "external_capacitance": pf(args.excap_pf) if args.excap_pf is not None else None,
    }
    return {k: v for k, v in fields.items() if v is not None}


def _resolve_call(args):
    from scmr_coil import compute

    fields = _named_fields(args)
    if args.geometry:
        positional = _parse_positional(args.geometry)
        if not fields:
            return compute(*positional)
        # a profile name may still take --excap
        if (len(positional) == 1 and isinstance(positional[0], str)
                and set(fields) == {"external_capacitance"}):
            return compute(profile=positional[0], **fields)
        raise InvalidArgument("Give the geometry either positionally or with flags, not both")
    return compute(**fields)


def _print_result(console, result):
    from rich.table import Table

    from scmr_coil.visualization.report import (
        geometry_lines, prediction_lines, optima_lines,
    )

    for builder in (geometry_lines, prediction_lines, optima_lines):
        title, _, *rows = builder(result)
        table = Table(title=title)
        table.add_column("Quantity", style="cyan")
        table.add_column("Value", style="green")
        for row in rows:
            label, value = row.split("=", 1)
            table.add_row(label.strip(), value.strip())
        console.print(table)

    checks = Table(title="Validity Checks")
    checks.add_column("Condition", style="cyan")
    checks.add_column("Status")
    for w in result.validation.warnings:
        status = f"[bold red]{w.message}[/bold red]" if w.violated else "[green]ok[/green]"
        checks.add_row(w.condition, status)
    console.print(checks)


def cmd_compute(args):
    """Compute and report one coil."""
    from rich.console import Console

    console = Console()
    result = _resolve_call(args)

    if args.json:
        console.print_json(json.dumps(result.summary(), default=str))
    elif args.text:
        console.print(result.report(), markup=False, highlight=False)
    else:
        _print_result(console, result)

    if args.plot:
        from scmr_coil.visualization.plots import CoilPlotter
        plotter = CoilPlotter()
        plotter.plot_q_vs_frequency(result.geometry, result.resonant_frequency,
                                    save_path=args.plot)
        console.print(f"\n[dim]Q(f) plot saved to {args.plot}[/dim]")


def cmd_profiles(args):
    """List the named coil profiles."""
    from rich.console import Console
    from rich.table import Table

    from scmr_coil.geometry.profiles import list_profiles

    console = Console()
    table = Table(title="Coil Profiles")
    table.add_column("Profile", style="cyan")
    table.add_column("rc (mm)", style="green")
    table.add_column("r (cm)", style="green")
    table.add_column("Pitch (mm)", style="green")
    table.add_column("Turns", style="green")
    table.add_column("Description")

    for p in list_profiles():
        table.add_row(
            p["key"],
            f"{p['cross_section_radius_m'] * 1e3:.4f}",
            f"{p['loop_radius_m'] * 1e2:.3f}",
            f"{p['pitch_m'] * 1e3:.4f}",
            f"{p['turn_count']:g}",
            p["description"],
        )
    console.print(table)


def cmd_sweep(args):
    """Tabulate Q over a log frequency range."""
    from rich.console import Console
    from rich.table import Table

    from scmr_coil.geometry.profiles import get_profile
    from scmr_coil.optimizer.closed_form import local_max_frequency, q_sweep

    console = Console()
    geom = get_profile(args.profile).geometry()
    f_max = local_max_frequency(geom)
    start = args.start * 1e6 if args.start else f_max / 100
    stop = args.stop * 1e6 if args.stop else f_max * 100
    freqs, q = q_sweep(geom, start, stop, args.points)

    table = Table(title=f"Q sweep: {args.profile} (max at {f_max / 1e6:.3f} MHz)")
    table.add_column("f (MHz)", style="cyan")
    table.add_column("Q", style="green")
    for f, qv in zip(freqs, q):
        table.add_row(f"{f / 1e6:.4f}", f"{qv:.2f}")
    console.print(table)


def cmd_design(args):
    """Wire and loop radius whose Q peaks at a target frequency."""
    from rich.console import Console

    from scmr_coil.optimizer.closed_form import (
        OPTIMAL_RADIUS_RATIO, global_max_q, wire_for_frequency,
    )

    console = Console()
    ratio = args.ratio or OPTIMAL_RADIUS_RATIO
    rc, r = wire_for_frequency(args.freq * 1e6, args.turns, ratio)

    console.print(f"\n[bold]Coil for max Q at {args.freq} MHz, {args.turns:g} turns[/bold]")
    console.print(f"  r/rc:                 {ratio:.3f}")
    console.print(f"  Cross-section radius: {rc * 1e3:.4f} mm")
    console.print(f"  Loop radius:          {r * 1e2:.4f} cm")
    console.print(f"  Global max Q:         {global_max_q(args.turns, rc):.1f}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="SCMR Coil — closed-form wireless power coil calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python app.py compute                          # Default 22 AWG coil
  python app.py compute bigwire --text           # Plain text report
  python app.py compute 1e-3 5 0.05 3e-3         # rc N r pitch (meters)
  python app.py compute --awg 18 -n 8 -r 0.05    # Named fields
  python app.py compute --plot q.png             # Save Q(f) plot
        """,
    )
    parser.add_argument("--log-level", default=None,
                        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level (default: $SCMR_LOG_LEVEL or WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    # Compute command
    comp_parser = subparsers.add_parser("compute", help="Compute one coil")
    comp_parser.add_argument("geometry", nargs="*",
                             help="Profile name, or RC N R [PITCH [CAP]] in SI units")
    comp_parser.add_argument("--profile", type=str, default=None)
    comp_parser.add_argument("--rc", type=float, default=None,
                             help="Cross-section radius (m)")
    comp_parser.add_argument("--awg", type=float, default=None,
                             help="Cross-section as AWG gauge")
    comp_parser.add_argument("-n", "--turns", type=float, default=None)
    comp_parser.add_argument("-r", "--radius", type=float, default=None,
                             help="Loop radius (m)")
    comp_parser.add_argument("-s", "--pitch", type=float, default=None,
                             help="Pitch (m)")
    comp_parser.add_argument("--excap", type=float, default=None, dest="excap_pf",
                             help="External capacitance (pF)")
    comp_parser.add_argument("--json", action="store_true", help="Print JSON summary")
    comp_parser.add_argument("--text", action="store_true", help="Print plain text report")
    comp_parser.add_argument("--plot", type=str, default=None,
                             help="Save Q vs frequency plot to this path")

    # Profiles command
    subparsers.add_parser("profiles", help="List coil profiles")

    # Sweep command
    sweep_parser = subparsers.add_parser("sweep", help="Q over frequency")
    sweep_parser.add_argument("-p", "--profile", type=str, default="wire")
    sweep_parser.add_argument("--start", type=float, default=None, help="Start (MHz)")
    sweep_parser.add_argument("--stop", type=float, default=None, help="Stop (MHz)")
    sweep_parser.add_argument("--points", type=int, default=21)

    # Design command
    design_parser = subparsers.add_parser("design", help="Size a coil for a max-Q frequency")
    design_parser.add_argument("-f", "--freq", type=float, default=13.56,
                               help="Target frequency (MHz)")
    design_parser.add_argument("-n", "--turns", type=float, default=5)
    design_parser.add_argument("-t", "--ratio", type=float, default=None,
                               help="Loop/wire radius ratio (default: Q-optimal)")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    commands = {
        "compute": cmd_compute,
        "profiles": cmd_profiles,
        "sweep": cmd_sweep,
        "design": cmd_design,
    }

    try:
        commands[args.command](args)
    except (InvalidArgument, GeometryDomainError) as exc:
        from rich.console import Console
        from rich.markup import escape
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(2)


if __name__ == "__main__":
    main()
