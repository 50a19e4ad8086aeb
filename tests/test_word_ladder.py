import io

import pytest

from cslabs.word_ladder import NO_LADDER, WordLadder, main, one_off

WORDS = "sears seals sells bells belts\nhappy\n"


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text(WORDS)
    return path


def test_one_off():
    assert one_off("sears", "seals")
    assert not one_off("sears", "sears")
    assert not one_off("sears", "bells")
    assert not one_off("sears", "sear")


def test_loads_words(dictionary):
    ladder = WordLadder(dictionary)
    assert ladder.words == ["sears", "seals", "sells", "bells", "belts", "happy"]
    assert "happy" in ladder


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        WordLadder(tmp_path / "absent.txt")


def test_wrong_length_word_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("sears toolong\n")
    with pytest.raises(ValueError, match="Not a five letter word"):
        WordLadder(path)


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        WordLadder(path)


def test_find_ladder_links_words(dictionary):
    ladder = WordLadder(dictionary).find_ladder("sears", "belts")
    assert ladder[0] == "sears"
    assert ladder[-1] == "belts"
    assert all(one_off(a, b) for a, b in zip(ladder, ladder[1:]))


def test_find_ladder_is_shortest(tmp_path):
    path = tmp_path / "d.txt"
    path.write_text("aaaaa baaaa bbaaa bbbaa abbaa aabaa\n")
    ladder = WordLadder(path).find_ladder("aaaaa", "aabaa")
    assert ladder == ["aaaaa", "aabaa"]


def test_find_ladder_none(dictionary):
    assert WordLadder(dictionary).find_ladder("sears", "happy") is None


def test_find_ladder_same_word(dictionary):
    assert WordLadder(dictionary).find_ladder("happy", "happy") == ["happy"]


def test_find_ladder_repeatable(dictionary):
    ladder = WordLadder(dictionary)
    expected = ["sears", "seals", "sells", "bells", "belts"]
    assert ladder.find_ladder("sears", "belts") == expected
    assert ladder.find_ladder("sears", "belts") == expected


def test_invalid_word_raises(dictionary):
    with pytest.raises(ValueError, match="Not a valid word"):
        WordLadder(dictionary).find_ladder("sears", "zzzzz")


def test_output_ladder(dictionary, tmp_path):
    out = tmp_path / "out.txt"
    WordLadder(dictionary).output_ladder("sears", "belts", out)
    assert out.read_text() == "sears seals sells bells belts "


def test_output_no_ladder(dictionary, tmp_path):
    out = tmp_path / "out.txt"
    WordLadder(dictionary).output_ladder("happy", "belts", out)
    assert out.read_text() == NO_LADDER


def test_output_same_word(dictionary, tmp_path):
    out = tmp_path / "out.txt"
    WordLadder(dictionary).output_ladder("bells", "bells", out)
    assert out.read_text() == "bells"


def test_output_bad_directory_raises(dictionary, tmp_path):
    with pytest.raises(OSError, match="Could not open output file"):
        WordLadder(dictionary).output_ladder("sears", "belts", tmp_path / "no" / "x.txt")


def test_main_writes_ladder(dictionary, tmp_path, monkeypatch):
    out = tmp_path / "ladder.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{dictionary}\nsears\nbelts\n{out}\n"))
    assert main() == 0
    assert out.read_text() == "sears seals sells bells belts "


def test_main_reports_invalid_word(dictionary, tmp_path, monkeypatch, capsys):
    out = tmp_path / "ladder.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{dictionary}\nsears\nxxxxx\n{out}\n"))
    main()
    assert "Not a valid word" in capsys.readouterr().out
    assert not out.exists()