"""Render six minutes of drifting ambient noise to a WAV file."""

from __future__ import annotations

import argparse
import logging
import sys

from . import DEFAULT_CONFIG, SynthesisEngine
from .utils.audio import write_wav

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(description=__doc__)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = DEFAULT_CONFIG
    engine = SynthesisEngine(config=config)
    buffer = engine.render()

    try:
        path = write_wav(config.output_path, buffer, config.sample_rate)
    except OSError as exc:
        logger.error("Failed to write %s: %s", config.output_path, exc)
        return 1

    print(f"Audio file saved as {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
