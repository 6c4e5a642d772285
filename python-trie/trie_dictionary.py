"""
Dictionary driver – load a CSV word list into a Trie and print completions.

Run:
    python trie_dictionary.py dictionary.csv --query Now
Each line's first comma-separated field is taken as a quoted word.
"""

import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional

from trie import Trie

log = logging.getLogger("python_trie")

DEFAULT_PATH = "dictionary.csv"
DEFAULT_QUERY = "Now"


def extract_word(line: str) -> Optional[str]:
    """Return the first field of a CSV line with its quotes stripped.

    Fields of one character or less carry no word and yield None.
    """
    field = line.rstrip("\r\n").split(",", 1)[0]
    if len(field) > 1:
        return field[1:-1]
    return None


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield the word of every usable line, skipping the rest."""
    for lineno, line in enumerate(lines, start=1):
        word = extract_word(line)
        if word is None:
            log.debug("Skipping line %d: no usable field", lineno)
            continue
        yield word


def load_dictionary(path: str) -> Trie:
    """Read a dictionary file and bulk-build a Trie from its words.

    Args:
        path: Location of the line-oriented CSV file.

    Returns:
        The populated Trie.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        trie = Trie.build_from(iter_words(f))
    log.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print dictionary completions for a prefix")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help=f"Dictionary CSV file (default: {DEFAULT_PATH})")
    parser.add_argument("--query", default=DEFAULT_QUERY, help=f"Prefix to complete (default: {DEFAULT_QUERY})")
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many completions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        trie = load_dictionary(args.path)
    except OSError as exc:
        print(f"[ERROR] Cannot read {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    completions = trie.get_completions(args.query)
    if args.limit is not None:
        completions = completions[: max(args.limit, 0)]

    print(f"Completions for {args.query!r} ({len(completions)}):")
    for word in completions:
        print(f"  {word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
