from unittest import mock

import pytest

from toytools.uptown import is_word_char, main, prepend_words


def _never(word):
    raise AssertionError(f"unexpected prompt for {word}")


def test_is_word_char():
    assert is_word_char("a")
    assert is_word_char("Z")
    assert is_word_char("_")
    assert not is_word_char("1")
    assert not is_word_char("-")
    assert not is_word_char("")


def test_empty_prefix_leaves_text_unchanged():
    text = 'int main(void) {\n\tprintf("hi");\n\treturn 0;\n}\n'
    assert prepend_words(text, {}, lambda word: "") == text


def test_prefix_is_prepended():
    prefixes = {"initLexer": "Toy_"}
    result = prepend_words("void initLexer(int x);", {}, lambda w: prefixes.get(w, ""))
    assert result == "void Toy_initLexer(int x);"


def test_each_word_asked_once_and_cached():
    asked = []

    def ask(word):
        asked.append(word)
        return ""

    cache = {}
    prepend_words("foo bar foo bar foo", cache, ask)
    assert sorted(asked) == ["bar", "foo"]
    assert cache == {"foo": "foo", "bar": "bar"}


def test_existing_cache_is_used():
    cache = {"x": "my_x"}
    assert prepend_words("x + x", cache, _never) == "my_x + my_x"


def test_comments_and_strings_are_untouched():
    text = '// alpha\n/* beta */ "gamma" delta'
    result = prepend_words(text, {}, lambda w: "p_")
    assert result.startswith('// alpha\n/* beta */ "gamma" ')
    assert result.endswith("p_delta")


def test_line_comment_at_end_without_newline():
    text = "a // tail"
    result = prepend_words(text, {}, lambda w: "q")
    assert result.endswith("// tail")


def test_unterminated_block_comment_raises():
    with pytest.raises(ValueError):
        prepend_words("x /* never closed", {}, lambda w: "")


def test_main_rewrites_files_with_shared_cache(tmp_path):
    first = tmp_path / "a.c"
    second = tmp_path / "b.c"
    first.write_text("foo;\n", encoding="utf-8")
    second.write_text("foo;\n", encoding="utf-8")
    with mock.patch("builtins.input", return_value="lib_") as fake_input:
        assert main([str(first), str(second)]) == 0
    assert fake_input.call_count == 1
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")
    assert first.read_text(encoding="utf-8").startswith("lib_foo")


def test_main_requires_arguments():
    assert main([]) == -1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "gone.c")]) == -1