from pathlib import Path

from letter_trie.best_words import main

SMALL_WORDS = str(Path(__file__).parent.parent / "testdata" / "words-small.txt")


def test_best_words(tmp_path, capsys):
    racks = tmp_path / "racks.txt"
    racks.write_text("carde\n\nxyz\ngod\nzqiu\n")
    main(["--dictionary", SMALL_WORDS, "--no_progress", str(racks)])
    captured = capsys.readouterr()
    assert captured.out == "carde: card 7\nxyz: -\ngod: dog 5\nzqiu: quiz 22\n"
    assert "4 racks" in captured.err


def test_boggle_values(tmp_path, capsys):
    racks = tmp_path / "racks.txt"
    racks.write_text("carde\nqiuz\n")
    main(
        [
            "--dictionary", SMALL_WORDS,
            "--no_progress",
            "--alphabet", "boggle",
            "--values", "boggle",
            str(racks),
        ]
    )
    captured = capsys.readouterr()
    # car, card and care all score 1; ties go to the first word.
    # "qiuz" has no "qu" tile, so it's rejected.
    assert captured.out == "carde: car 1\n"
    assert "qiuz" in captured.err
