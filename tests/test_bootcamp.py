import pytest

from labkit.bootcamp import add_main, sum_files


def test_add_defaults(capsys):
    assert add_main([]) == 0
    assert capsys.readouterr().out == "15000 + 213 = 15213\nThe result is 15213.\n"


def test_add_negate(capsys):
    assert add_main(["-n"]) == 0
    assert capsys.readouterr().out == (
        "15000 + 213 = 15213\nNegating 15213 yields -15213\nThe result is -15213.\n"
    )


def test_add_custom_values(capsys):
    assert add_main(["-a", "1", "-b", "2"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "1 + 2 = 3"


def test_add_non_numeric_is_zero(capsys):
    assert add_main(["-a", "abc", "-b", "0"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "The result is 0."


def test_add_unknown_option():
    assert add_main(["-z"]) == 1


def test_sum_files_round_trip(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("a = 3\nb = 4\n")
    assert sum_files(str(src), str(dst)) == 7
    assert dst.read_text() == "a + b = 7\n"


def test_sum_files_negative_and_loose_spacing(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("a=-5\n\n  b =   5\n")
    assert sum_files(str(src), str(dst)) == 0
    assert dst.read_text() == "a + b = 0\n"


def test_sum_files_bad_format(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("x = 1\ny = 2\n")
    with pytest.raises(ValueError):
        sum_files(str(src), str(tmp_path / "out.txt"))
    assert not (tmp_path / "out.txt").exists()


def test_sum_files_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        sum_files(str(tmp_path / "absent.txt"), str(tmp_path / "out.txt"))