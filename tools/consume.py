"""Consume MD5 fixtures and validate them against the Python implementation."""

from __future__ import annotations

from pathlib import Path
import logging
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tools"))

from md5_spec.errors import SpecError  # noqa: E402
from fixtures_io import fixtures_dir, replay_hash_vector, replay_state_vector  # noqa: E402
from yaml_dump import read_yaml  # noqa: E402

logger = logging.getLogger(__name__)


def _check_hash_vectors(path: Path) -> list[str]:
    failures: list[str] = []
    for item in read_yaml(path).get("test_vectors", []):
        if replay_hash_vector(item) != item["expected_hex"]:
            failures.append(f"{item['name']}: digest_mismatch")
    return failures


def _check_state_vectors(path: Path) -> list[str]:
    failures: list[str] = []
    for item in read_yaml(path).get("test_vectors", []):
        try:
            actual = replay_state_vector(item)
        except SpecError as e:
            failures.append(f"{item['name']}: {e}")
            continue
        if actual != item["expected_hex"]:
            failures.append(f"{item['name']}: resume_mismatch")
    return failures


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    crypto = fixtures_dir() / "crypto"

    failures: list[str] = []
    checked = 0

    md5 = crypto / "md5.yaml"
    if md5.exists():
        failures.extend(_check_hash_vectors(md5))
        checked += 1

    state = crypto / "md5_state.yaml"
    if state.exists():
        failures.extend(_check_state_vectors(state))
        checked += 1

    if checked == 0:
        logger.error(f"No fixtures found under {crypto}")
        raise SystemExit(1)

    if failures:
        for f in failures:
            logger.error(f"FAIL {f}")
        raise SystemExit(1)

    logger.info("All fixtures passed")


if __name__ == "__main__":
    main()
