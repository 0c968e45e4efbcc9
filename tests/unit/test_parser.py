from __future__ import annotations

import pytest

from pandaloterias.engine.modality import ModalityResolver
from pandaloterias.engine.parser import (
    ERROR_UNSUPPORTED_MODALITY,
    BetInputParser,
    ParseMeta,
    describe_discarded,
    parse_bet_input,
)


def test_milhares_separated_by_spaces():
    result = parse_bet_input("2690 1480 3290", "MILHAR")

    assert result.valid == ["2690", "1480", "3290"]
    assert result.meta == ParseMeta(discarded=0, total_processed=3, total_valid=3)


def test_concatenated_milhares_are_chunked():
    result = parse_bet_input("26901234", "MILHAR")

    assert result.valid == ["2690", "1234"]


def test_centena_exact_and_trailing_digit():
    assert parse_bet_input("123", "CENTENA").valid == ["123"]

    result = parse_bet_input("1234", "CENTENA")
    assert result.valid == ["123"]
    assert result.meta.discarded == 1
    assert result.meta.total_processed == 2
    assert result.meta.total_valid == 1


def test_separators_are_ignored_in_fixed_width_mode():
    result = parse_bet_input("12-34\n56,7.8;90", "DEZENA")

    assert result.valid == ["12", "34", "56", "78", "90"]
    assert result.meta.discarded == 0


def test_unidade_chunks_every_digit():
    result = parse_bet_input("1 2 3", "UN")

    assert result.valid == ["1", "2", "3"]


def test_fixed_width_keeps_duplicates():
    result = parse_bet_input("1234 1234", "M C")

    assert result.valid == ["1234", "1234"]


def test_grupo_bounds_and_padding():
    result = parse_bet_input("1, 5, 10, 26, 0", "GRUPO")

    assert result.valid == ["01", "05", "10"]
    assert result.meta.discarded == 2
    assert result.meta.total_processed == 5
    assert result.meta.total_valid == 3
    assert result.meta.is_group


def test_grupo_does_not_split_concatenated_digits():
    result = parse_bet_input("12345", "GP")

    assert result.valid == []
    assert result.meta.discarded == 1
    assert result.meta.total_processed == 1


def test_grupo_keeps_duplicates_and_leading_zeros():
    result = parse_bet_input("007 7 25", "GRUPO")

    assert result.valid == ["07", "07", "25"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_input_is_not_an_error(text):
    result = parse_bet_input(text, "MILHAR")

    assert result.valid == []
    assert result.meta == ParseMeta()
    assert result.ok


def test_text_without_digits_yields_zero_counts():
    result = parse_bet_input("abc, def", "CENTENA")

    assert result.valid == []
    assert result.meta.total_processed == 0
    assert result.meta.discarded == 0


def test_unsupported_modality_is_reported_as_data():
    result = parse_bet_input("1234", "PASSE VAI")

    assert result.valid == []
    assert result.meta.error == ERROR_UNSUPPORTED_MODALITY
    assert not result.ok


@pytest.mark.parametrize(
    ("modality", "width"),
    [("MILHAR", 4), ("CENTENA INV", 3), ("DEZENA ESQ", 2), ("UNIDADE", 1)],
)
def test_width_and_digit_coverage(modality, width):
    text = "9 87-654 3210 12345 6"
    digit_count = sum(char.isdigit() for char in text)

    result = parse_bet_input(text, modality)

    assert all(len(value) == width for value in result.valid)
    assert result.meta.total_valid * width + result.meta.discarded == digit_count
    assert result.meta.discarded < width


def test_parse_is_idempotent():
    first = parse_bet_input("2690 14803", "MILHAR")
    second = parse_bet_input("2690 14803", "MILHAR")

    assert first == second


def test_to_dict_uses_draft_keys():
    payload = parse_bet_input("1, 30", "GRUPO").to_dict()

    assert payload == {
        "valid": ["01"],
        "meta": {
            "discarded": 1,
            "totalProcessed": 2,
            "totalValid": 1,
            "isGroup": True,
            "error": None,
        },
    }


def test_custom_group_range_and_resolver():
    parser = BetInputParser(resolver=ModalityResolver({"BX": "GRUPO"}), group_min=1, group_max=10)

    result = parser.parse("3 11", "bx")

    assert result.valid == ["03"]
    assert result.meta.discarded == 1


def test_invalid_group_range_raises():
    with pytest.raises(ValueError, match="group_min"):
        BetInputParser(group_min=10, group_max=5)


def test_discarded_warnings():
    assert describe_discarded(parse_bet_input("1234", "MILHAR")) is None
    assert describe_discarded(parse_bet_input("1234", "CENTENA")) == (
        "1 dígito(s) sobrando no final foram ignorados (incompleto)."
    )
    assert describe_discarded(parse_bet_input("1 30 40", "GRUPO")) == (
        "2 número(s) inválido(s) (fora de 1-25) foram ignorados."
    )
    assert describe_discarded(parse_bet_input("12", "PASSE VAI"), "PASSE VAI") == (
        'A modalidade "PASSE VAI" não suporta a função Copiar e Colar.'
    )


def test_grupo_discards_very_long_digit_runs():
    result = parse_bet_input("1 " + "9" * 5000 + " 2", "GRUPO")

    assert result.valid == ["01", "02"]
    assert result.meta.discarded == 1
    assert result.meta.total_processed == 3


def test_grupo_long_run_of_leading_zeros_is_still_read():
    result = parse_bet_input("0" * 5000 + "7", "GRUPO")

    assert result.valid == ["07"]


def test_grupo_warning_uses_parser_bounds():
    parser = BetInputParser(group_min=1, group_max=10)
    result = parser.parse("3 11 12", "GRUPO")

    assert describe_discarded(result, "GRUPO", group_min=1, group_max=10) == (
        "2 número(s) inválido(s) (fora de 1-10) foram ignorados."
    )
