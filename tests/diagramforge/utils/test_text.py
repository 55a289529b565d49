from diagramforge.utils.text import first_non_blank_line, join_lines, split_lines

def test_split_keeps_trailing_empty_line():
    assert split_lines("a\nb\n") == ["a", "b", ""]

def test_split_keeps_carriage_returns():
    assert split_lines("a\r\nb") == ["a\r", "b"]

def test_join_inverts_split():
    for text in ["", "a", "a\n", "\n\n", "a\r\nb\n"]:
        assert join_lines(split_lines(text)) == text

def test_first_non_blank_line_skips_blank_lines():
    assert first_non_blank_line("\n  \n  pie title X  \nmore") == "pie title X"

def test_first_non_blank_line_none_safe():
    assert first_non_blank_line("") == ""
    assert first_non_blank_line(None) == ""
    assert first_non_blank_line(" \n\t") == ""
