"""Generate MD5 YAML vectors from the Python implementation."""

from __future__ import annotations

from pathlib import Path
import logging
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tools"))

from md5_spec.crypto.hash_vectors import md5_vectors, state_vectors  # noqa: E402
from fixtures_io import fixtures_dir  # noqa: E402
from yaml_dump import write_yaml  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    out = fixtures_dir() / "crypto"
    out.mkdir(parents=True, exist_ok=True)

    write_yaml(out / "md5.yaml", md5_vectors())
    write_yaml(out / "md5_state.yaml", state_vectors())
    logger.info(f"Wrote MD5 vectors into {out}")


if __name__ == "__main__":
    main()
