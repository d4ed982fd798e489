#!/usr/bin/env python
"""Find the words that can be made from a rack of tiles or a grid of dice.

$ python -m letter_trie.find_words --rack retains
$ python -m letter_trie.find_words --values boggle --alphabet boggle --all --board "a b c d e f g h i"

By default only successively better words are printed, so the last line is the
best word. Use --all to print every word scoring more than --best.
"""

import argparse
import math
import sys
import time

from letter_trie.args import (
    add_standard_args,
    get_alphabet_from_args,
    get_annotated_trie_from_args,
    setup_logging,
)
from letter_trie.constraint import DiceGrid, Rack
from letter_trie.neighbors import parse_dims
from letter_trie.search import BoundedSearcher
from letter_trie.tree_printer import format_score


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="find_words",
        description="Find words on a rack or a board of dice.",
    )
    add_standard_args(parser)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--rack", type=str, help="Letters on the rack, e.g. 'cardeg'.")
    source.add_argument(
        "--board",
        type=str,
        help="Dice faces in column-major order. Separate faces with spaces if any has "
        "more than one letter. Use '.' for an empty cell.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Board dimensions as WH, e.g. 44 for 4x4. Guessed from --board if omitted.",
    )
    parser.add_argument(
        "--best",
        type=float,
        default=-math.inf,
        help="Only report words scoring more than this.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Report every word above --best, not just improvements.",
    )
    args = parser.parse_args(argv)
    setup_logging(args)

    alphabet = get_alphabet_from_args(args)
    if args.rack is not None:
        constraint = Rack.from_letters(args.rack, alphabet)
    else:
        dims = parse_dims(args.size) if args.size else None
        constraint = DiceGrid.from_board(args.board, dims, alphabet)

    _t, _scorer, annotated = get_annotated_trie_from_args(args)
    searcher = BoundedSearcher(annotated)

    start_s = time.time()
    n = 0
    for match in searcher.search(constraint, args.best, improving=not args.all):
        print(f"{alphabet.join(match.units)} {format_score(match.score)}")
        n += 1
    elapsed_s = time.time() - start_s
    stats = searcher.stats
    sys.stderr.write(
        f"{n} words in {elapsed_s:.3f}s "
        f"(visited {stats.visited} nodes, pruned {stats.pruned})\n"
    )


if __name__ == "__main__":
    main()
