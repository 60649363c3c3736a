"""Elite stay scoring: score properties from exported stay reports.

Usage:
    python main.py                          # Score the file at SNAPSHOT_PATH
    python main.py data/hotel.json          # Score a specific snapshot file
    python main.py --as-of 2026-03-01       # Score as of a fixed date
    python main.py --json                   # Print full results as JSON
"""

import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from config.settings import Settings
from models.results import PropertyIntelligence
from models.stay_report import PropertySnapshot
from scoring.pipeline import score_property

logger = logging.getLogger("elite_scoring")

_SNAPSHOTS = TypeAdapter(list[PropertySnapshot])


def load_snapshots(path: Path) -> list[PropertySnapshot]:
    """Read one snapshot object or a list of them from a JSON file."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = [raw]
    return _SNAPSHOTS.validate_python(raw)


def score_all(
    snapshots: list[PropertySnapshot],
    now: datetime,
    default_brand_code: str = "",
) -> list[PropertyIntelligence]:
    results = []
    for snapshot in snapshots:
        if not snapshot.brand_code and default_brand_code:
            snapshot = snapshot.model_copy(update={"brand_code": default_brand_code})
        results.append(score_property(snapshot, now))
    return results


def main(
    path: Optional[str] = None,
    as_of: Optional[datetime] = None,
    as_json: bool = False,
) -> int:
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    snapshot_path = Path(path or settings.snapshot_path)
    now = as_of or settings.as_of or datetime.now(UTC)

    try:
        snapshots = load_snapshots(snapshot_path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {snapshot_path}: {type(e).__name__}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid snapshot data in {snapshot_path}:\n{e}")
        return 1

    logger.info(f"Scoring {len(snapshots)} properties as of {now.isoformat()}")
    results = score_all(snapshots, now, settings.brand_code)

    # Best reputation first
    results.sort(key=lambda r: r.reputation.score, reverse=True)

    if as_json:
        print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        for result in results:
            print(result.summary_line())

    return 0


def cli() -> None:
    parser = argparse.ArgumentParser(description="Elite stay scoring")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Property snapshot JSON file (defaults to SNAPSHOT_PATH)",
    )
    parser.add_argument(
        "--as-of",
        type=datetime.fromisoformat,
        default=None,
        help="Score as of this ISO date/time instead of now",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print full results as JSON",
    )
    args = parser.parse_args()
    sys.exit(main(path=args.path, as_of=args.as_of, as_json=args.json))


if __name__ == "__main__":
    cli()
