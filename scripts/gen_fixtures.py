#!/usr/bin/env python3
"""Generate antenna map fixtures for testing.

Fixtures are small hand-designed text maps covering the loader's happy
path and its rejection cases.

Usage:
    python scripts/gen_fixtures.py

Output:
    tests/fixtures/*.txt

Dependencies:
    This script imports from shared/fixtures_expected.py (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"

# Raw bytes per fixture so line endings are exact
FIXTURE_CONTENT: dict[str, bytes] = {
    "corners_3x3.txt": b"..A\n...\nB..\n",
    "crlf_endings.txt": b"A..\r\n.B.\r\n",
    "empty.txt": b"",
    "no_antennas.txt": b"....\n....\n",
    "ragged_rows.txt": b"A...\n..\n....\n",
    "sample_map.txt": (
        b"............\n"
        b"........0...\n"
        b".....0......\n"
        b".......0....\n"
        b"....0.......\n"
        b"......A.....\n"
        b"............\n"
        b"............\n"
        b"........A...\n"
        b".........A..\n"
        b"............\n"
        b"............\n"
    ),
    "trailing_blank_lines.txt": b".A.\n...\n\n\n",
}


def write_fixture(name: str) -> Path:
    """Write one fixture and return its path."""
    path = FIXTURES_DIR / name
    path.write_bytes(FIXTURE_CONTENT[name])
    print(f"  Created: {name}")
    return path


def main() -> int:
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("Generating antenna map fixtures")
    print("=" * 60)

    for name in sorted(FIXTURE_CONTENT):
        write_fixture(name)

    # Verify generated fixtures match expected list exactly
    found_set = {f.name for f in FIXTURES_DIR.iterdir() if f.suffix == ".txt"}
    expected_set = set(EXPECTED_FIXTURES)

    if len(found_set) != EXPECTED_FIXTURE_COUNT or found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
