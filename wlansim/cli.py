"""Command-line front end: pick a generation, sweep client counts, print the statistics."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wlansim.config_factory import SCENARIOS, load_config, make_config
from wlansim.errors import WlanSimError
from wlansim.experiments import ExperimentResult, ExperimentRunner
from wlansim.phy_profiles import PHY_PROFILES
from wlansim.utils import export_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wi-Fi 4/5/6 medium access contention simulator")
    parser.add_argument("-g", "--generation", type=int, choices=sorted(PHY_PROFILES), default=4,
                        help="Wi-Fi generation to simulate (default: 4)")
    parser.add_argument("-p", "--packets", type=int, default=100,
                        help="packets (rounds) per client count (default: 100)")
    parser.add_argument("-c", "--clients", type=int, nargs="+", default=None,
                        help="client counts to sweep (default: taken from the scenario)")
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="baseline")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    parser.add_argument("--config", default=None, help="YAML scenario file; overrides the options above")
    parser.add_argument("--export", metavar="DIR", default=None, help="write JSON/CSV results into DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every collision")
    return parser


def format_experiment(exp: ExperimentResult) -> str:
    profile = PHY_PROFILES[exp.generation]
    summary = exp.summary
    lines = [
        "--------------------------------------------------------",
        f"{profile.name} results for {exp.client_count} client(s):",
        f"Throughput: {summary.theoretical_max_throughput_mbps:.2f} Mbps",
        f"Achievable Throughput: {summary.achieved_throughput_mbps:.2f} Mbps",
    ]
    if exp.generation != 4:
        lines.append(f"Total Credited Throughput: {summary.credited_throughput_mbps:.2f} Mbps")
    lines += [
        f"Successful Transmissions: {exp.results.success_count}/{exp.results.attempt_count}",
        f"Average Latency: {summary.avg_latency_ms:.3f} ms",
        f"Peak Latency: {summary.peak_latency_ms:.3f} ms",
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.config:
            config = load_config(args.config)
        else:
            config = make_config(
                generation=args.generation,
                scenario=args.scenario,
                packet_count=args.packets,
                client_counts=args.clients,
                seed=args.seed,
            )
        experiments = ExperimentRunner(config).run()
    except WlanSimError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"\nWi-Fi {config.generation} Simulation")
    for exp in experiments:
        print(f"\nSimulating with {exp.client_count} clients:")
        print(format_experiment(exp))

    if args.export:
        paths = export_results(experiments, config=config, out_dir=args.export)
        print(f"\nExported results to {paths['json']} and {paths['csv']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
