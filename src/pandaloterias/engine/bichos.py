"""Fixed jogo do bicho group -> animal mapping (display only)."""

from __future__ import annotations

from .valendo import group_from_last2, only_digits

BICHOS_NOME: dict[int, str] = {
    1: "Avestruz",
    2: "Águia",
    3: "Burro",
    4: "Borboleta",
    5: "Cachorro",
    6: "Cabra",
    7: "Carneiro",
    8: "Camelo",
    9: "Cobra",
    10: "Coelho",
    11: "Cavalo",
    12: "Elefante",
    13: "Galo",
    14: "Gato",
    15: "Jacaré",
    16: "Leão",
    17: "Macaco",
    18: "Porco",
    19: "Pavão",
    20: "Peru",
    21: "Touro",
    22: "Tigre",
    23: "Urso",
    24: "Veado",
    25: "Vaca",
}


def grupo_do_bicho(numero: int | str) -> int | None:
    """Group (1-25) of a milhar, centena or dezena, from its last two digits."""
    digits = only_digits(numero)
    if not digits:
        return None
    group = group_from_last2(digits.zfill(2)[-2:])
    return int(group) if group is not None else None


def _as_int(value: object) -> int | None:
    digits = only_digits(value)
    if not digits:
        return None
    significant = digits.lstrip("0")
    if len(significant) > len(str(max(BICHOS_NOME))):
        return None
    return int(significant or "0")


def nome_bicho(grupo: int | str) -> str:
    return BICHOS_NOME.get(_as_int(grupo) or 0, "")


def nome_do_bicho(numero_or_grupo: int | str, is_grupo: bool = False) -> str:
    if is_grupo:
        return nome_bicho(numero_or_grupo)
    grupo = grupo_do_bicho(numero_or_grupo)
    return BICHOS_NOME.get(grupo or 0, "")
