from identicon.utils.text_utils import escape_lines, loggable_input, truncate_middle


def test_truncate_middle() -> None:
    assert truncate_middle("short", 10) == "short"
    assert truncate_middle("abcdefghij", 4) == "ab......ij"
    assert truncate_middle("abcdefghij", 4, head_len=1) == "a......hij"


def test_loggable_input_escapes_and_truncates() -> None:
    assert escape_lines("a\nb\r") == "a\\nb\\r"
    assert loggable_input("a\nb", 40) == "a\\nb"
    assert loggable_input("x" * 100, 10) == "xxxxx......xxxxx"
