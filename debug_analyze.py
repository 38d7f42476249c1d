"""
Debug script to analyze repositories and save profiles to local files.

No presentation layer — just fetch, classify and synthesize.
Results are saved as JSON files in the debug_output/ directory.

Usage:
    python debug_analyze.py https://github.com/owner/repo
    python debug_analyze.py https://github.com/a/b https://github.com/c/d
"""

import asyncio
import json
import os
import sys
import time
from datetime import datetime

from repo_profiler.orchestrator import AnalysisOutcome, RepositoryAnalyzer
from repo_profiler.utils.logger import setup_logger

logger = setup_logger("debug_analyze")

OUTPUT_DIR = os.path.join(os.path.dirname(__file__), "debug_output")


def save_outcome(url: str, outcome: AnalysisOutcome, elapsed: float):
    """Save an analysis outcome to a JSON file."""
    os.makedirs(OUTPUT_DIR, exist_ok=True)

    data = {
        "url": url,
        "analyzed_at": datetime.utcnow().isoformat(),
        "elapsed_seconds": round(elapsed, 2),
        "kind": outcome.kind,
        "profile": outcome.profile.to_dict() if outcome.profile else None,
        "detail": outcome.detail,
    }

    name = url.rstrip("/").split("/")[-1] or "repository"
    filepath = os.path.join(OUTPUT_DIR, f"{name}.json")
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    logger.info(f"Saved {outcome.kind} outcome to {filepath}")


def print_summary(url: str, outcome: AnalysisOutcome, elapsed: float):
    """Print a short summary for one analysis."""
    print(f"\n{'='*60}")
    print(f"  {url} — {elapsed:.1f}s")
    print(f"{'='*60}")
    if not outcome.is_ok:
        print(f"  Error: {outcome.detail}")
        return

    profile = outcome.profile.to_dict()
    print(f"  Project type:  {profile['project_type']}")
    print(f"  Language:      {profile['language']}")
    print(f"  Tech stack:    {', '.join(profile['tech_stack']) or '-'}")
    print(f"  Quality:       {profile['quality']}")
    print(f"  Dependencies:  {profile['dependencies']}")
    print(f"  Activity:      {profile['activity']}")
    if profile["preview_url"]:
        print(f"  Preview:       {profile['preview_url']}")
    print()


async def main(urls: list):
    analyzer = RepositoryAnalyzer()
    for url in urls:
        started = time.monotonic()
        outcome = await analyzer.run(url)
        elapsed = time.monotonic() - started
        print_summary(url, outcome, elapsed)
        save_outcome(url, outcome, elapsed)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1:]))
