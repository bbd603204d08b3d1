from textwrap import dedent

import pytest

from filelist import (
    parse,
    parse_str,
    parse_lines,
    ParseOptions,
    ErrorMode,
    FilelistCollector,
    Filelist,
    Define,
    Include,
    File,
    V,
    Y,
    ErrorKind,
    FilelistLineError,
    FilelistLexError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)


def test_end_to_end():
    src = dedent(
        """\
        +define+DEFINE1=true
        +incdir+../sv/
        ../sv/adder.sv
        # comment
        +define+DEFINE3
        -v ../lib/old.v
        """
    )
    f = parse_str(src)
    assert f.defines == ["DEFINE1=true", "DEFINE3"]
    assert f.includes == ["../sv/"]
    assert f.files == ["../sv/adder.sv"]
    assert f.libraries == [V(library_file="../lib/old.v")]
    assert f.library_files == ["../lib/old.v"]
    assert f.errors == []
    assert parse(src) == f


def test_order_preserved_per_kind():
    f = parse_lines(
        ["+define+D1", "+incdir+I1", "+define+D2=x", "f1.sv", '+define+D3="y"']
    )
    assert f.defines == ["D1", "D2=x", "D3=y"]
    assert f.includes == ["I1"]
    assert f.files == ["f1.sv"]


def test_libraries():
    f = parse_lines(["-y lib/a", "-v lib/b.v", "-y lib/c"])
    assert f.libraries == [Y("lib/a"), V("lib/b.v"), Y("lib/c")]
    assert f.library_dirs == ["lib/a", "lib/c"]
    assert f.files == []


def test_repeats_are_kept():
    f = parse_lines(["top.sv", "top.sv", "+incdir+inc", "+incdir+inc"])
    assert f.files == ["top.sv", "top.sv"]
    assert f.includes == ["inc", "inc"]


def test_blank_and_comment_lines():
    f = parse_str("\n   \n# only a comment\n\t\n")
    assert f == Filelist()


def test_crlf_line_endings():
    f = parse_str("+define+A=b\r\n+incdir+inc\r\ntop.sv\r\n")
    assert f.defines == ["A=b"]
    assert f.includes == ["inc"]
    assert f.files == ["top.sv"]


def test_error_line_number():
    src = "+define+A\n\n# comment\n+define+\ntop.sv\n"
    with pytest.raises(FilelistLineError) as e:
        parse_str(src)
    err = e.value
    assert err.index == 3
    assert err.line == "+define+"
    assert isinstance(err.detail, UnexpectedEndOfInput)
    assert err.kind == ErrorKind.UNEXPECTED_END_OF_INPUT
    assert err.path is None
    assert "Line 4" in str(err)
    assert "no matching directive" in str(err)
    # Results before the failing line are kept, nothing after it
    assert err.partial.defines == ["A"]
    assert err.partial.files == []


def test_error_names_the_token():
    with pytest.raises(FilelistLineError) as e:
        parse_lines(["top.sv", "+incdir+ -v lib.v"])
    assert e.value.index == 1
    assert isinstance(e.value.detail, UnexpectedToken)
    assert "'-v'" in str(e.value)
    assert e.value.partial.files == ["top.sv"]


def test_lex_error_line():
    with pytest.raises(FilelistLineError) as e:
        parse_lines(["a.sv", "b.sv", "c$.sv"])
    assert e.value.index == 2
    assert isinstance(e.value.detail, FilelistLexError)
    assert e.value.kind == ErrorKind.INVALID_TOKEN


def test_store_mode():
    options = ParseOptions(errormode=ErrorMode.STORE)
    with pytest.warns(UserWarning, match="Line 2"):
        f = parse_lines(["a.sv", "-v", "b.sv", "+define+X=", "+define+Y"], options=options)
    assert f.files == ["a.sv", "b.sv"]
    assert f.defines == ["Y"]
    assert [(e.index, e.line, e.kind) for e in f.errors] == [
        (1, "-v", ErrorKind.UNEXPECTED_END_OF_INPUT),
        (3, "+define+X=", ErrorKind.UNEXPECTED_END_OF_INPUT),
    ]


def test_collector_routing():
    c = FilelistCollector()
    for cmd in [Define("A", "1"), Include("inc"), File("top.sv"), V("x.v"), Define("B")]:
        c.add(cmd)
    assert c.filelist == Filelist(
        defines=["A=1", "B"], includes=["inc"], files=["top.sv"], libraries=[V("x.v")]
    )
    with pytest.raises(TypeError):
        c.add("top.sv")
