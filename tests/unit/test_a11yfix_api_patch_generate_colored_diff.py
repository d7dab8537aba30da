"""Unit tests for a11yfix.api.patch.generate_colored_diff."""

import pytest

from a11yfix.api.patch.generate_colored_diff import generate_colored_diff

pytestmark = pytest.mark.unit

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


def test_insertion_is_green():
    assert generate_colored_diff("cat", "cats") == f"cat{GREEN}s{RESET}"


def test_deletion_is_red():
    assert generate_colored_diff("cats", "cat") == f"cat{RED}s{RESET}"


def test_replacement_shows_removed_then_added():
    assert generate_colored_diff("cat", "cut") == f"c{RED}a{RESET}{GREEN}u{RESET}t"


def test_identical_texts_have_no_escapes():
    assert generate_colored_diff('<img alt="x">', '<img alt="x">') == '<img alt="x">'


def test_result_is_stripped():
    assert generate_colored_diff("  x  \n", "  x  \n") == "x"


def test_without_color():
    assert generate_colored_diff("cat", "cut", color=False) == "caut"


def test_truecolor_system():
    rendered = generate_colored_diff("cat", "cats", color_system="truecolor")
    assert rendered.startswith("cat\x1b[")
    assert rendered.endswith(f"s{RESET}")


def test_unknown_color_system():
    with pytest.raises(ValueError, match="Unknown color system"):
        generate_colored_diff("a", "b", color_system="cga")
