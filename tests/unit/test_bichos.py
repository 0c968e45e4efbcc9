from __future__ import annotations

from pandaloterias.engine.bichos import BICHOS_NOME, grupo_do_bicho, nome_bicho, nome_do_bicho


def test_table_covers_all_groups():
    assert sorted(BICHOS_NOME) == list(range(1, 26))
    assert BICHOS_NOME[1] == "Avestruz"
    assert BICHOS_NOME[25] == "Vaca"


def test_grupo_from_milhar_centena_and_dezena():
    assert grupo_do_bicho("2690") == 23
    assert grupo_do_bicho(100) == 25
    assert grupo_do_bicho("5") == 2
    assert grupo_do_bicho("") is None


def test_names():
    assert nome_bicho("03") == "Burro"
    assert nome_bicho(26) == ""
    assert nome_do_bicho("1200") == "Vaca"
    assert nome_do_bicho(16, is_grupo=True) == "Leão"


def test_very_long_numbers_do_not_raise():
    assert nome_bicho("9" * 5000) == ""
    assert nome_bicho("0" * 5000 + "3") == "Burro"
    assert grupo_do_bicho("1" * 5000) == 3
