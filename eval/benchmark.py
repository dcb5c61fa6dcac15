#!/usr/bin/env python3
"""Run the language detection benchmark and write release-gate artifacts.

Manifest format (JSONL):
{"id": "en-001", "text": "In every generation there is a chosen one.", "language": "en"}
"""

from __future__ import annotations

import argparse
import asyncio
import csv
import json
import subprocess
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from rubyglot.config import load_config
from rubyglot.eval import DetectionSample, summarize_detection
from rubyglot.helper import LanguageHelper


@dataclass(frozen=True)
class BenchmarkCase:
    case_id: str
    text: str
    language: str


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run rubyglot detection benchmark.")
    parser.add_argument("--manifest", required=True, help="Path to benchmark JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    parser.add_argument("--env", default=None, help="Config profile (default: RUBYGLOT_ENV)")
    return parser.parse_args()


def load_manifest(path: Path) -> list[BenchmarkCase]:
    cases: list[BenchmarkCase] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        cases.append(
            BenchmarkCase(
                case_id=str(payload.get("id") or f"line-{line_num}"),
                text=str(payload["text"]),
                language=str(payload["language"]),
            )
        )
    return cases


async def run_benchmark(cases: list[BenchmarkCase], helper: LanguageHelper) -> dict[str, Any]:
    samples: list[DetectionSample] = []
    rows: list[dict[str, Any]] = []

    for case in cases:
        started = time.perf_counter()
        result = await helper.detector.identify(case.text)
        elapsed = time.perf_counter() - started

        sample = DetectionSample(
            expected=case.language,
            detected=result.language.code,
            stage=result.stage,
            runtime_sec=elapsed,
        )
        samples.append(sample)
        rows.append(
            {
                "case_id": case.case_id,
                "expected": case.language,
                "detected": result.language.code,
                "stage": result.stage or "undetermined",
                "correct": sample.correct,
                "runtime_sec": round(elapsed, 6),
            }
        )

    return {"summary": summarize_detection(samples), "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "manifest_path": str(manifest),
        "summary": result["summary"],
    }
    (out_dir / "metrics.json").write_text(
        json.dumps(metrics_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "per_case.csv").open("w", encoding="utf-8", newline="") as handle:
        fieldnames = list(result["rows"][0].keys()) if result["rows"] else []
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        if result["rows"]:
            writer.writeheader()
            writer.writerows(result["rows"])
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()


async def _main_async(args: argparse.Namespace) -> int:
    manifest = Path(args.manifest)
    cases = load_manifest(manifest)
    helper = await LanguageHelper.create(load_config(args.env))
    result = await run_benchmark(cases, helper)
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


def main() -> int:
    return asyncio.run(_main_async(parse_args()))


if __name__ == "__main__":
    raise SystemExit(main())
