"""Export sweep results to JSON/CSV."""

from __future__ import annotations

import csv
import datetime
import json
import os
from dataclasses import asdict
from typing import Any, Dict, List


def export_results(experiments: List, *, config, out_dir: str = "exports") -> Dict[str, str]:
    """
    Write one JSON and one CSV file describing a finished sweep.

    Returns paths of the JSON and CSV files written.
    """
    os.makedirs(out_dir, exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")

    runs = []
    for exp in experiments:
        results = asdict(exp.results)
        results["latency_samples"] = list(exp.results.latency_samples)
        runs.append(
            {
                "client_count": exp.client_count,
                "summary": asdict(exp.summary),
                "results": results,
            }
        )

    data: Dict[str, Any] = {
        "timestamp": ts,
        "generation": config.generation,
        "scenario": config.scenario,
        "packet_count": config.packet_count,
        "seed": config.seed,
        "runs": runs,
    }

    json_path = os.path.join(out_dir, f"results-{ts}.json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    csv_path = os.path.join(out_dir, f"results-{ts}.csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            "generation",
            "client_count",
            "success_count",
            "attempt_count",
            "total_duration_s",
            "elapsed_s",
            "theoretical_max_mbps",
            "achieved_mbps",
            "credited_mbps",
            "avg_latency_ms",
            "peak_latency_ms",
        ])
        for exp in experiments:
            writer.writerow([
                exp.generation,
                exp.client_count,
                exp.results.success_count,
                exp.results.attempt_count,
                exp.results.total_duration_s,
                exp.results.elapsed_s,
                exp.summary.theoretical_max_throughput_mbps,
                exp.summary.achieved_throughput_mbps,
                exp.summary.credited_throughput_mbps,
                exp.summary.avg_latency_ms,
                exp.summary.peak_latency_ms,
            ])

    return {"json": json_path, "csv": csv_path}
