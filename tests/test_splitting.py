import pytest

from pipeline_runner.splitting import find_quote_end, split, split_command


def test_split_worked_example():
    text = "hello world this is a test"
    assert split(text, " ") == text.split(" ")


def test_split_leading_separators():
    assert split("cccmohammad", "c") == ["mohammad"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_only_separators():
    assert split("     ", " ") == []


@pytest.mark.parametrize(
    "text,sep",
    [
        ("ls -l", " "),
        ("  ls   -l  -a ", " "),
        ("/usr/bin:/bin::/usr/local/bin:", ":"),
        (":::a:b", ":"),
        ("single", " "),
    ],
)
def test_split_matches_filtered_str_split(text, sep):
    assert split(text, sep) == [w for w in text.split(sep) if w]


@pytest.mark.parametrize("text", ["a b c", "grep -v foo", "x"])
def test_split_round_trip_single_separators(text):
    assert " ".join(split(text, " ")) == text


def test_split_words_never_contain_separator():
    words = split("a  bb   ccc d", " ")
    assert all(" " not in w and w for w in words)


def test_split_word_cannot_end_on_non_ascii():
    assert split("café bar", " ") == ["café bar"]


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a b", sep)


def test_split_command_rejects_bad_separator():
    with pytest.raises(ValueError):
        split_command("a b", "  ")


def test_find_quote_end_finds_matching_quote():
    text = "echo 'a b' c"
    x = text.index("'")
    end = find_quote_end(text, x - 1, x)
    assert end == text.rindex("'")
    assert text[end] == text[x]


def test_find_quote_end_double_quote_ignores_single():
    text = "\"it's\" done"
    end = find_quote_end(text, -1, 0)
    assert end == text.rindex('"')


def test_find_quote_end_not_a_quote_returns_x():
    assert find_quote_end("abc", 0, 1) == 1


def test_find_quote_end_unclosed_returns_x():
    text = "say 'hello"
    x = text.index("'")
    assert find_quote_end(text, x - 1, x) == x


def test_split_command_keeps_single_quoted_run():
    assert split_command("awk '{print $1}'", " ") == ["awk", "'{print $1}'"]


def test_split_command_keeps_double_quoted_run():
    assert split_command('grep "a b" file', " ") == ["grep", '"a b"', "file"]


def test_split_command_quote_inside_word():
    text = 'a"b c"d e'
    assert split_command(text, " ") == [text[:7], text[8:]]


@pytest.mark.parametrize("text", ["ls -l", "  wc   -l ", "cat", ""])
def test_split_command_without_quotes_equals_split(text):
    assert split_command(text, " ") == split(text, " ")


def test_split_command_unclosed_quote_is_ordinary():
    text = "echo 'a b"
    assert split_command(text, " ") == split(text, " ")


def test_split_command_round_trip():
    text = "sed 's/a b/c d/' input"
    assert " ".join(split_command(text, " ")) == text