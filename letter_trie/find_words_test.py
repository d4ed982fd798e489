from pathlib import Path

import pytest

from letter_trie.find_words import main

SMALL_WORDS = str(Path(__file__).parent.parent / "testdata" / "words-small.txt")


def run(capsys, *args):
    main(["--dictionary", SMALL_WORDS, *args])
    return capsys.readouterr().out


def test_rack(capsys):
    assert run(capsys, "--rack", "carde") == "car 5\ncard 7\n"
    assert run(capsys, "--rack", "CARDE", "--all") == "car 5\ncard 7\ncare 6\n"
    assert run(capsys, "--rack", "carde", "--all", "--best", "6") == "card 7\n"
    assert run(capsys, "--rack", "xyz") == ""


def test_board(capsys):
    out = run(capsys, "--board", "c a r d", "--size", "22", "--values", "length")
    assert out == "car 3\ncard 4\n"
    # c and a aren't adjacent in a single column
    assert run(capsys, "--board", "cra", "--size", "13") == ""


def test_boggle_board(capsys):
    out = run(
        capsys,
        "--board", "qu i z .",
        "--alphabet", "boggle",
        "--values", "length",
        "--all",
    )
    assert out == "quiz 3\n"


def test_needs_rack_or_board():
    with pytest.raises(SystemExit):
        main(["--dictionary", SMALL_WORDS])
    with pytest.raises(SystemExit):
        main(["--dictionary", SMALL_WORDS, "--rack", "abc", "--board", "abcd"])
