"""Standard command-line arguments shared across tools."""

import argparse
import logging

from letter_trie.alphabet import ALPHABETS, Alphabet
from letter_trie.annotate import AnnotatedTrie, annotate
from letter_trie.scoring import VALUE_TABLES, ValueTable
from letter_trie.trie import Trie
from letter_trie.wordlist import make_trie


def add_standard_args(parser: argparse.ArgumentParser, *, values="scrabble"):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--alphabet",
        choices=tuple(ALPHABETS),
        default="letters",
        help="How words are split into units. 'boggle' makes 'qu' a single unit.",
    )
    parser.add_argument(
        "--values",
        choices=tuple(VALUE_TABLES),
        default=values,
        help="Value table used to score words.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=1,
        help="Skip dictionary words with fewer letters than this.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log word-list loading and search statistics.",
    )


def setup_logging(args: argparse.Namespace):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_alphabet_from_args(args: argparse.Namespace) -> Alphabet:
    return ALPHABETS[args.alphabet]()


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    return make_trie(
        args.dictionary, get_alphabet_from_args(args), min_length=args.min_length
    )


def get_annotated_trie_from_args(
    args: argparse.Namespace,
) -> tuple[Trie, ValueTable, AnnotatedTrie]:
    t = get_trie_from_args(args)
    t.freeze()
    scorer = VALUE_TABLES[args.values]()
    return t, scorer, annotate(t, scorer)
