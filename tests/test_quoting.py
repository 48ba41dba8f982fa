import pytest

from ustr.quoting import NULL_STRING, quoted_str


@pytest.mark.parametrize(
    "text, start, end, escape, expected",
    [
        ("", '"', '"', "\\", '""'),
        ("hello", '"', '"', "\\", '"hello"'),
        ("hello world 123", '"', '"', "\\", '"hello world 123"'),
        ('say "hello"', '"', '"', "\\", '"say \\"hello\\""'),
        (
            '"quoted" and "more quotes"',
            '"',
            '"',
            "\\",
            '"\\"quoted\\" and \\"more quotes\\""',
        ),
        ("path\\file", '"', '"', "\\", '"path\\\\file"'),
        (
            "\\\\server\\\\share\\\\file",
            '"',
            '"',
            "\\",
            '"\\\\\\\\server\\\\\\\\share\\\\\\\\file"',
        ),
        ('say "hello\\world"', '"', '"', "\\", '"say \\"hello\\\\world\\""'),
        ("hello", "'", "'", "\\", "'hello'"),
        ("don't worry", "'", "'", "\\", "'don\\'t worry'"),
        ('say "hello"', '"', '"', "/", '"say /"hello/""'),
        ('say "hello\\world"', '"', '"', "\0", '"say "hello\\world""'),
        ("Hello 世界! 🌍", '"', '"', "\\", '"Hello 世界! 🌍"'),
        ('说 "你好" 世界', '"', '"', "\\", '"说 \\"你好\\" 世界"'),
        ('"""', '"', '"', "\\", '"\\"\\"\\""'),
        ("\\\\\\", '"', '"', "\\", '"\\\\\\\\\\\\"'),
        ('"', '"', '"', "\\", '"\\""'),
        ("\\", '"', '"', "\\", '"\\\\"'),
        ("It's a \"test\"", "'", "'", "\\", "'It\\'s a \"test\"'"),
        ("test[bracket]", "[", "[", "/", "[test/[bracket]["),
        ("test|pipe^caret", "|", "|", "^", "|test^|pipe^^caret|"),
        ("hello world", "[", "]", "\\", "[hello world]"),
        ("content", "<", ">", "\\", "<content>"),
        ("text", "(", ")", "\\", "(text)"),
        ("test[start", "[", "]", "/", "[test/[start]"),
        ("end]test", "[", "]", "/", "[end/]test]"),
        ("[both]", "[", "]", "/", "[/[both/]]"),
        ("test/slash", "[", "]", "/", "[test//slash]"),
        ("[start/middle]end", "[", "]", "/", "[/[start//middle/]end]"),
        ("tag>content<tag", "<", ">", "\\", "<tag\\>content\\<tag>"),
        ("func(param)", "(", ")", "\\", "(func\\(param\\))"),
    ],
)
def test_quoted_str_cases(text, start, end, escape, expected):
    assert quoted_str(text, start, end, escape) == expected


def test_large_string():
    text = "x" * 1000 + '"test"' + "y" * 1000
    result = quoted_str(text, '"', '"', "\\")
    assert result[0] == '"'
    assert result[-1] == '"'
    assert '\\"test\\"' in result
    assert len(result) == len(text) + 4


def test_utf8_enabled():
    assert quoted_str("Hello 世界! 🌍", '"', '"', "\\", True) == '"Hello 世界! 🌍"'


def test_utf8_disabled_with_escaping():
    assert quoted_str("Price: €10", "[", "]", "%", False) == "[Price: €10]"


def test_utf8_mode_leaves_non_ascii_delimiters_alone():
    assert quoted_str("a«b", "«", "»", "\\", True) == "«a«b»"


def test_ascii_mode_escapes_non_ascii_delimiters():
    assert quoted_str("a«b", "«", "»", "\\", False) == "«a\\«b»"


def test_utf8_mode_still_escapes_ascii():
    assert quoted_str('说 "x"', '"', '"', "\\", True) == '"说 \\"x\\""'


def test_defaults_use_double_quote_and_backslash():
    assert quoted_str('a"b\\c') == '"a\\"b\\\\c"'


def test_none_gives_null():
    assert quoted_str(None) == NULL_STRING == "null"


@pytest.mark.parametrize("escape", [None, "", "\0"])
def test_no_escape_variants(escape):
    assert quoted_str('a"b', '"', '"', escape) == '"a"b"'


@pytest.mark.parametrize(
    "start, end, escape",
    [("", '"', "\\"), ('"', "ab", "\\"), ('"', '"', "//")],
)
def test_invalid_delimiters_rejected(start, end, escape):
    with pytest.raises(ValueError):
        quoted_str("x", start, end, escape)


def test_non_string_rejected():
    with pytest.raises(TypeError):
        quoted_str(42)