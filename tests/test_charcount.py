import io
import sys

from gopl.charcount import charcount_main, count_chars, dedup, dedup_main


def test_counts_ascii():
    cc = count_chars(b"aab")
    assert cc.counts["a"] == 2
    assert cc.counts["b"] == 1
    assert cc.utflen[1] == 3
    assert cc.invalid == 0


def test_counts_by_encoded_length():
    text = "a\u00e9\u4e16\U0001f600"
    cc = count_chars(text.encode("utf-8"))
    for ch in text:
        assert cc.utflen[len(ch.encode("utf-8"))] == 1
        assert cc.counts[ch] == 1


def test_invalid_bytes():
    cc = count_chars(b"\xffa\xc3(")
    assert cc.invalid == 2
    assert cc.counts["a"] == 1
    assert cc.counts["("] == 1


def test_replacement_character_encoded_is_valid():
    cc = count_chars("\ufffd".encode("utf-8"))
    assert cc.invalid == 0
    assert cc.counts["\ufffd"] == 1
    assert cc.utflen[3] == 1


def test_charcount_main_report(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"aa\n\xff")))
    assert charcount_main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "rune\tcount"
    assert "'a'\t2" in lines
    assert "'\\n'\t1" in lines
    assert "len\tcount" in lines
    assert lines[-1] == "1 invalid UTF-8 characters"


def test_dedup_keeps_first_occurrences():
    lines = ["x", "y", "x", "z", "y"]
    result = list(dedup(lines))
    assert len(result) == len(set(lines))
    assert result == sorted(set(lines), key=lines.index)


def test_dedup_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("one\ntwo\none\r\n"))
    assert dedup_main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["one", "two"]