from __future__ import annotations

from src.effect_studio.identifiers import ALPHABET, generate_id


def test_alphabet_is_alphanumeric() -> None:
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62
    assert ALPHABET.isalnum()


def test_generate_id_length_and_symbols() -> None:
    for length in (1, 8, 21):
        value = generate_id(length)
        assert len(value) == length
        assert set(value) <= set(ALPHABET)


def test_generate_id_default_length() -> None:
    assert len(generate_id()) == 21


def test_generate_id_zero_length() -> None:
    assert generate_id(0) == ""
