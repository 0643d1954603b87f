from solong.wordtab import find, find_unquoted, split_words


def test_find_returns_position():
    text = "hello world"
    assert find(text, "world", 100) == text.index("world")


def test_find_missing_needle():
    assert find("hello", "xyz", 100) == -1


def test_find_needle_longer_than_limit():
    assert find("hello world", "world", 3) == -1


def test_find_stops_at_nul():
    assert find("abc\0world", "world", 100) == -1


def test_find_result_is_a_real_match():
    text = 'static char *x[] = { "a b", "c d" };'
    pos = find(text, '"', len(text))
    assert text[pos] == '"'
    assert '"' not in text[:pos]


def test_find_unquoted_skips_quoted_text():
    text = 'a "//" // tail'
    pos = find_unquoted(text, "//", len(text))
    assert pos == text.rindex("//")


def test_find_unquoted_without_quotes_matches_find():
    text = "x /* y */ z"
    assert find_unquoted(text, "/*", len(text)) == find(text, "/*", len(text))


def test_find_unquoted_only_inside_quotes():
    text = '"/* inside */"'
    assert find_unquoted(text, "/*", len(text)) == -1


def test_find_unquoted_respects_limit():
    assert find_unquoted("ab//", "//", 1) == -1


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_split_words_join_round_trip():
    words = ["16", "16", "4", "1"]
    assert split_words(" \t".join(words)) == words