# tests/test_reconstruct.py

from __future__ import annotations

from gedcom_reader.loader import (
    LineToken,
    merge_continuations,
    reconstruct_values,
    tokenize_text,
)


def _tokens(text: str):
    return list(tokenize_text(text))


def test_cont_inserts_line_break() -> None:
    merged = reconstruct_values(_tokens("1 NOTE First\n2 CONT Second\n2 CONT Third"))
    assert len(merged) == 1
    assert merged[0].value == "First\nSecond\nThird"


def test_conc_appends_without_separator() -> None:
    merged = reconstruct_values(_tokens("1 NOTE The word TE\n2 CONC ST is whole"))
    assert merged[0].value == "The word TEST is whole"


def test_mixed_cont_and_conc_follow_stream_order() -> None:
    text = "\n".join([
        "0 @N1@ NOTE A note",
        "1 CONT Note continued here. The word TE",
        "1 CONC ST should not be broken!",
        "1 SOUR @S1@",
    ])
    merged = reconstruct_values(_tokens(text))
    assert [t.tag for t in merged] == ["NOTE", "SOUR"]
    assert merged[0].value == "A note\nNote continued here. The word TEST should not be broken!"
    assert merged[1].value == "@S1@"


def test_missing_base_value_counts_as_empty() -> None:
    merged = reconstruct_values(_tokens("1 NOTE\n2 CONC abc\n2 CONT def"))
    assert merged[0].value == "abc\ndef"


def test_cont_without_value_adds_empty_line() -> None:
    merged = reconstruct_values(_tokens("1 NOTE Para one\n2 CONT\n2 CONT Para two"))
    assert merged[0].value == "Para one\n\nPara two"


def test_leading_continuation_is_dropped() -> None:
    merged = reconstruct_values(_tokens("1 CONC orphan\n0 HEAD"))
    assert [t.tag for t in merged] == ["HEAD"]


def test_merged_token_keeps_base_line_number() -> None:
    merged = reconstruct_values(_tokens("0 HEAD\n1 NOTE a\n2 CONT b"))
    note = merged[1]
    assert note.lineno == 2
    assert note.level == 1


def test_input_tokens_are_not_mutated() -> None:
    base = LineToken(level=1, xref_id=None, tag="NOTE", value="x", lineno=1)
    cont = LineToken(level=2, xref_id=None, tag="CONT", value="y", lineno=2)
    merged = list(merge_continuations([base, cont]))
    assert merged[0].value == "x\ny"
    assert base.value == "x"


def test_merge_is_lazy() -> None:
    def stream():
        yield LineToken(level=0, xref_id=None, tag="HEAD", lineno=1)
        yield LineToken(level=0, xref_id=None, tag="TRLR", lineno=2)
        raise AssertionError("read past the second token")

    gen = merge_continuations(stream())
    assert next(gen).tag == "HEAD"
