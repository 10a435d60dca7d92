"""Dataset loader for labeled verification cases."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Case:
    """A single labeled upload."""

    id: int
    filename: str
    mime_type: str
    expected_status: str
    expected_confidence: int | None


def _parse_confidence(raw: str) -> int | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer confidence: {raw!r}")
        return None


def load_cases(path: Path) -> list[Case]:
    """Load cases from CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    cases = []

    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)

        for idx, row in enumerate(reader):
            case = Case(
                id=idx,
                filename=(row.get("filename") or "").strip(),
                mime_type=(row.get("mime_type") or "").strip(),
                expected_status=(row.get("expected_status") or "").strip().lower(),
                expected_confidence=_parse_confidence(row.get("expected_confidence") or ""),
            )

            if case.filename and case.expected_status:
                cases.append(case)

    logger.info(f"Loaded {len(cases)} cases from {path}")
    return cases
