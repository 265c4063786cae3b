"""Build the WordNet lookup tables used by the API.

Usage:
    PYTHONPATH=src python src/scripts/build_lexicon_tables.py
    PYTHONPATH=src python src/scripts/build_lexicon_tables.py --only japanese
    wordtree-build-tables --data-dir data --omw-dir data/omw-1.4
"""

import argparse
import logging
import sys
from pathlib import Path

from domain.model.errors import BuildAbortedError
from services.lexicon_builder import build_japanese_wordnet, build_multilingual_wordnet
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build WordNet lookup tables")
    parser.add_argument("--data-dir", type=Path, default=Path("data"),
                        help="Directory holding downloaded inputs and built tables")
    parser.add_argument("--omw-dir", type=Path, default=None,
                        help="OMW 1.4 directory (default: <data-dir>/omw-1.4)")
    parser.add_argument("--only", choices=["japanese", "multilingual"], default=None,
                        help="Build only one of the two tables")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    setup_structured_logging()
    args = parse_args(argv)
    data_dir: Path = args.data_dir
    omw_dir: Path = args.omw_dir or data_dir / "omw-1.4"

    try:
        if args.only in (None, "japanese"):
            build_japanese_wordnet(
                word_path=data_dir / "wnjpn-ok.tab",
                definitions_path=data_dir / "wnjpn-def.tab",
                output_path=data_dir / "japanese-wordnet.json",
            )
        if args.only in (None, "multilingual"):
            build_multilingual_wordnet(
                omw_dir=omw_dir,
                output_path=data_dir / "multilingual-wordnet.json",
            )
    except BuildAbortedError as e:
        logger.error("Build aborted", extra={"error": str(e)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
