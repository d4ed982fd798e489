#!/usr/bin/env python
"""Find the best word for each of many racks.

Reads one rack per line from the files given, or stdin:

$ python -m letter_trie.best_words racks.txt

Each rack gets one output line, "rack: word score", or "rack: -" if no word fits.
Ties go to the alphabetically first word.
"""

import argparse
import fileinput
import sys
import time

from tqdm import tqdm

from letter_trie.args import (
    add_standard_args,
    get_alphabet_from_args,
    get_annotated_trie_from_args,
    setup_logging,
)
from letter_trie.constraint import Rack
from letter_trie.search import best_match
from letter_trie.tree_printer import format_score


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="best_words", description="Find the best word for each rack."
    )
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing racks, or stdin"
    )
    parser.add_argument(
        "--no_progress",
        action="store_true",
        help="Don't show a progress bar.",
    )
    args = parser.parse_args(argv)
    setup_logging(args)

    alphabet = get_alphabet_from_args(args)
    _t, _scorer, annotated = get_annotated_trie_from_args(args)

    start_s = time.time()
    n = 0
    with fileinput.input(files=args.files) as lines:
        for line in tqdm(lines, disable=args.no_progress, unit="rack", file=sys.stderr):
            letters = line.strip()
            if not letters:
                continue
            try:
                rack = Rack.from_letters(letters, alphabet)
            except ValueError as e:
                sys.stderr.write(f"{letters}: {e}\n")
                continue
            match = best_match(annotated, rack)
            if match:
                print(f"{letters}: {alphabet.join(match.units)} {format_score(match.score)}")
            else:
                print(f"{letters}: -")
            n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} racks in {elapsed_s:.2f}s = {rate:.2f} racks/s\n")


if __name__ == "__main__":
    main()
