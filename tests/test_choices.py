"""Tests for the choices-string decoder and keymap legend."""

from __future__ import annotations

import pytest

from ttydlg.core.choices import (
    RESERVED_LETTERS,
    Action,
    custom_key_table,
    decode,
    keymap_legend,
)

SAMPLES = ["", "AERCPQ", "H", "xyz", "APO", "aercpqh", "xXyYzZ", "12!1?", "Hé€é", "CcCc", "  p"]


def test_default_choices_enable_every_action_but_hide() -> None:
    spec = decode("AERCPQ")
    assert spec.reserved == frozenset(
        {Action.ANY, Action.ENTER, Action.REDO, Action.CANCEL, Action.PAUSE, Action.QUIT}
    )
    assert spec.custom_keys == ()
    assert spec.show_keymap


def test_empty_choices_are_valid() -> None:
    spec = decode("")
    assert spec.reserved == frozenset()
    assert spec.custom_keys == ()


def test_custom_keys_keep_first_encounter_order() -> None:
    assert decode("xyz").custom_keys == ("x", "y", "z")
    assert decode("APO").custom_keys == ("O",)
    assert decode("zAyEx").custom_keys == ("z", "y", "x")


def test_custom_keys_drop_duplicates_in_either_case() -> None:
    assert decode("xXyYx").custom_keys == ("x", "y")
    assert decode("Oo").custom_keys == ("O",)
    assert decode("1!1").custom_keys == ("1", "!")


def test_lowercase_reserved_letters_enable_their_action() -> None:
    lower = decode("c")
    upper = decode("C")
    assert lower.reserved == upper.reserved == frozenset({Action.CANCEL})
    assert lower.custom_keys == upper.custom_keys == ()


@pytest.mark.parametrize("choices", SAMPLES)
def test_custom_keys_never_contain_reserved_letters(choices: str) -> None:
    for key in decode(choices).custom_keys:
        assert key.upper() not in RESERVED_LETTERS


@pytest.mark.parametrize("choices", SAMPLES)
def test_decode_is_idempotent(choices: str) -> None:
    first = decode(choices)
    decode.cache_clear()
    assert decode(choices) == first


@pytest.mark.parametrize("choices", SAMPLES)
def test_custom_codes_are_contiguous_from_ten(choices: str) -> None:
    spec = decode(choices)
    codes = [code for _key, code in custom_key_table(spec)]
    assert codes == list(range(10, 10 + len(spec.custom_keys)))
    assert len(set(codes)) == len(codes)


def test_custom_code_matches_letters_case_insensitively() -> None:
    spec = decode("xyz")
    assert spec.custom_code("y") == 11
    assert spec.custom_code("Y") == 11
    assert spec.custom_code("w") is None


def test_custom_code_matches_symbols_exactly() -> None:
    spec = decode("1!")
    assert spec.custom_code("1") == 10
    assert spec.custom_code("!") == 11
    assert spec.custom_code("?") is None


def test_allows_reserved_action_through_any() -> None:
    spec = decode("A")
    assert spec.allows(Action.REDO)
    assert not spec.has(Action.REDO)
    assert not decode("E").allows(Action.QUIT)


def test_keymap_legend_for_default_choices() -> None:
    spec = decode("AERCPQ")
    assert keymap_legend(spec) == (
        "Enter=continue; R=redo; C/Esc=cancel; Q=quit; Press any key to continue; P/Space=pause"
    )
    assert keymap_legend(spec, paused=True).endswith("P/Space=resume")


def test_keymap_legend_lists_only_enabled_actions() -> None:
    assert keymap_legend(decode("APRC")) == "R=redo; C/Esc=cancel; Press any key to continue; P/Space=pause"
    assert keymap_legend(decode("xyz")) == ""
    assert keymap_legend(decode("H")) == ""


def test_hide_keymap_flag() -> None:
    assert not decode("AH").show_keymap
    assert decode("A").show_keymap
