"""
Smoke workload against a live RavenDB server.

Usage:
    python -m ycsb_ravendb.scripts.smoke_workload --url http://localhost:10301
    python -m ycsb_ravendb.scripts.smoke_workload --records 100 --fields 10 --field-length 100

Purpose:
- Initialize the binding (provisions the YCSB database when missing)
- Insert, read back, update, delete and re-read a small record set
- Print per-phase status counts; exit 1 if any phase saw an unexpected status

Dependencies: ycsb_ravendb.application
System role: Manual connectivity check for the RavenDB binding
"""

import argparse
import random
import string
import sys
from collections import Counter

from ycsb_ravendb.application.bindings import create_db
from ycsb_ravendb.configs import get_settings
from ycsb_ravendb.core.db import DB
from ycsb_ravendb.core.status import Status
from ycsb_ravendb.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)

TABLE = "usertable"

# Status every phase must report for the run to pass
EXPECTED = {
    "insert": Status.OK,
    "read": Status.OK,
    "update": Status.NOT_IMPLEMENTED,
    "scan": Status.NOT_IMPLEMENTED,
    "delete": Status.OK,
    "read_deleted": Status.NOT_FOUND,
}


def build_record(field_count: int, field_length: int, rng: random.Random) -> dict[str, bytes]:
    """Build a record of printable ASCII fields named field0..fieldN-1."""
    alphabet = string.ascii_letters + string.digits
    return {
        f"field{i}": "".join(rng.choices(alphabet, k=field_length)).encode("ascii")
        for i in range(field_count)
    }


def run_smoke_workload(
    db: DB,
    record_count: int,
    field_count: int = 10,
    field_length: int = 100,
    seed: int = 0,
) -> dict[str, Counter]:
    """
    Run every harness operation against an initialized binding.

    Args:
        db: Initialized binding
        record_count: Number of records to insert
        field_count: Fields per record
        field_length: Bytes per field value
        seed: Seed for the value generator

    Returns:
        dict[str, Counter]: Phase name -> Counter of statuses
    """
    rng = random.Random(seed)
    keys = [f"user{i}" for i in range(record_count)]
    counts: dict[str, Counter] = {phase: Counter() for phase in EXPECTED}

    records = {key: build_record(field_count, field_length, rng) for key in keys}
    for key, values in records.items():
        counts["insert"][db.insert(TABLE, key, values)] += 1

    for key, values in records.items():
        result: dict[str, bytes] = {}
        status = db.read(TABLE, key, None, result)
        if status.is_ok() and result != values:
            logger.warning(f"{__name__}:run_smoke_workload - Read back mismatch for {key}")
            status = Status.ERROR
        counts["read"][status] += 1

    for key, values in records.items():
        counts["update"][db.update(TABLE, key, values)] += 1

    counts["scan"][db.scan(TABLE, keys[0] if keys else "", record_count, None, [])] += 1

    for key in keys:
        counts["delete"][db.delete(TABLE, key)] += 1

    for key in keys:
        counts["read_deleted"][db.read(TABLE, key, None, {})] += 1

    return counts


def unexpected_phases(counts: dict[str, Counter]) -> list[str]:
    """Names of phases that reported any status other than the expected one."""
    return [
        phase
        for phase, counter in counts.items()
        if any(status is not EXPECTED[phase] for status in counter)
    ]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RavenDB binding smoke workload.")
    parser.add_argument("--url", help="RavenDB server URL (default: RAVENDB_URL or http://localhost:10301)")
    parser.add_argument("--records", type=int, default=10, help="Number of records (default: 10)")
    parser.add_argument("--fields", type=int, default=10, help="Fields per record (default: 10)")
    parser.add_argument("--field-length", type=int, default=100, help="Bytes per field (default: 100)")
    parser.add_argument("--seed", type=int, default=0, help="Value generator seed (default: 0)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    configure_logging(get_settings().log_level)

    properties = {"ravendb.url": args.url} if args.url else {}
    db = create_db("ravendb35", properties)
    db.initialize()
    try:
        counts = run_smoke_workload(db, args.records, args.fields, args.field_length, args.seed)
    finally:
        db.cleanup()

    for phase, counter in counts.items():
        summary = ", ".join(f"{status.value}={count}" for status, count in sorted(counter.items()))
        print(f"{phase:<13} {summary}")

    failed = unexpected_phases(counts)
    for phase in failed:
        for status in counts[phase]:
            if status is not EXPECTED[phase]:
                print(f"{phase}: {status.value} - {status.description}", file=sys.stderr)
    if failed:
        logger.error(f"{__name__}:main - Unexpected statuses in: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
