"""Single source of truth for expected antenna map test fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/test_fixtures_sanity.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "corners_3x3.txt",  # Antennas at two corners (hazard scenario)
        "crlf_endings.txt",  # Windows line endings
        "empty.txt",  # Zero-byte file
        "no_antennas.txt",  # Only empty cells
        "ragged_rows.txt",  # Second row shorter than the first
        "sample_map.txt",  # Mixed frequencies, several rows
        "trailing_blank_lines.txt",  # Blank lines after the last row
    ]
)

# Count derived from list for verification
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
