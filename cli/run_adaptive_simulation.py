import argparse
import logging
import random
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from adaptive_core.config import configure_logging, load_settings
from adaptive_core.question_bank import build_synthetic_bank, load_question_bank
from adaptive_core.simulation import SimulatedStudent, simulate_cohort

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate adaptive attempts for virtual students.")
    parser.add_argument("--students", type=int, default=20, help="number of simulated students")
    parser.add_argument("--length", type=int, default=10, help="items per attempt")
    parser.add_argument("--seed", type=int, default=None, help="random seed (overrides ADAPTIVE_SEED)")
    parser.add_argument("--bank", default=None, help="JSON item bank; synthetic bank when omitted")
    parser.add_argument("--per-level", type=int, default=6, help="items per tier in the synthetic bank")
    parser.add_argument("--env-file", default=None, help=".env file with ADAPTIVE_* settings")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    return parser


def render_results(results: List[SimulatedStudent]) -> Table:
    table = Table(title="Adaptive simulation")
    table.add_column("#", justify="right")
    table.add_column("True θ", justify="right")
    table.add_column("Est. θ", justify="right")
    table.add_column("SE", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Final tier")

    for i, r in enumerate(results, 1):
        s = r.summary
        table.add_row(
            str(i),
            f"{r.true_theta:+.2f}",
            f"{s.theta:+.2f}",
            f"{s.standard_error:.2f}",
            f"{s.correct}/{s.total}",
            s.final_level.value,
        )
    return table


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    seed = args.seed if args.seed is not None else settings.seed
    bank = load_question_bank(args.bank) if args.bank else build_synthetic_bank(per_level=args.per_level)
    if len(bank) == 0:
        console.print("[red]Question bank is empty.[/red]")
        return 1

    theta_rng = random.Random(seed)
    thetas = [theta_rng.gauss(0.0, 1.0) for _ in range(args.students)]
    logging.info(f"Running {args.students} attempts on a bank of {len(bank)} items")

    results = simulate_cohort(
        thetas,
        bank,
        length=args.length,
        seed=seed,
        settings=settings,
        progress=not args.no_progress,
    )

    console.print(render_results(results))
    if results:
        mean_err = sum(abs(r.summary.theta - r.true_theta) for r in results) / len(results)
        console.print(f"[bold cyan]Mean |θ̂ - θ|: {mean_err:.3f}[/bold cyan]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
