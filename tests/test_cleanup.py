from __future__ import annotations

import pytest

from food_advice.common.cleanup import CLEANUPS, strip_preamble

TIPS = "1. Úsalo en salsa.\n2. Ásalo con ajo.\n3. Congélalo triturado."

SAMPLES = [
    f"<think>\nThe user wants tomato tips in Spanish.\n</think>\n\n{TIPS}",
    f"Okay, let me think about tomatoes.\n\n{TIPS}",
    f"Vale, vamos a ver qué se puede hacer con el tomate.\n{TIPS}",
    f"The user asks about tomatoes, so I will list three short tips in Spanish.\n{TIPS}",
    f"Okay, here you go **Consejos**\n{TIPS}",
    TIPS,
    f"<think>\nThe user wants tips.\n</think>\n\nOkay, so.\n\n{TIPS}",
    f"Vale.\n\nOkay, let me think.\n\n{TIPS}",
    f"Okay, let me think.\n\nVale, entonces.\n\n{TIPS}",
]


def test_think_block_is_removed() -> None:
    assert strip_preamble(SAMPLES[0]) == TIPS


def test_english_filler_up_to_blank_line() -> None:
    assert strip_preamble(SAMPLES[1]) == TIPS


def test_spanish_filler_up_to_first_numbered_item() -> None:
    assert strip_preamble(SAMPLES[2]) == TIPS


def test_filler_up_to_bold_marker() -> None:
    assert strip_preamble(SAMPLES[4]) == f"**Consejos**\n{TIPS}"


def test_long_preamble_before_list_is_dropped() -> None:
    assert strip_preamble(SAMPLES[3]) == TIPS


def test_dash_bullets_count_as_list() -> None:
    text = "I should answer briefly and in Spanish, without any introduction.\n- Pela.\n- Corta.\n- Sirve."
    assert strip_preamble(text) == "- Pela.\n- Corta.\n- Sirve."


@pytest.mark.parametrize("text", SAMPLES)
def test_cleanup_is_idempotent(text: str) -> None:
    once = strip_preamble(text)
    assert strip_preamble(once) == once


def test_marker_within_offset_is_not_truncated() -> None:
    text = f"Consejos para el tomate:\n{TIPS}"
    assert strip_preamble(text) == text


def test_filler_without_stop_point_is_kept() -> None:
    assert strip_preamble("Okay") == "Okay"
    assert strip_preamble("  Vale, ningún consejo.  ") == "Vale, ningún consejo."


def test_filler_must_be_a_whole_word() -> None:
    text = f"Okra asada:\n\n{TIPS}"
    assert strip_preamble(text) == text


def test_known_limitation_legitimate_intro_is_dropped() -> None:
    # An intro longer than the offset threshold is treated as reasoning.
    text = f"Aquí van tres consejos prácticos para aprovechar bien el tomate:\n{TIPS}"
    assert strip_preamble(text) == TIPS


def test_known_limitation_unlisted_phrasing_is_kept() -> None:
    text = f"Thinking about it, tomatoes are versatile.\n\n{TIPS}"
    assert strip_preamble(text) == text


def test_none_cleanup_only_trims() -> None:
    text = f"Okay, let me think.\n\n{TIPS}"
    assert CLEANUPS["none"](f"  {text}\n") == text


@pytest.mark.parametrize("text", SAMPLES[6:])
def test_mixed_filler_runs_are_removed_in_one_pass(text: str) -> None:
    assert strip_preamble(text) == TIPS
