"""VALENDO derivation: new bet lines of other modalities from a base milhar/centena set."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .modality import Modality

logger = logging.getLogger(__name__)

BASE_WIDTH = 4
MIN_BASE_DIGITS = 3

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def only_digits(value: object) -> str:
    return _NON_DIGIT_RE.sub("", str(value if value is not None else ""))


def unique_in_order(values: Iterable[str]) -> list[str]:
    """Drop empty and repeated values, keeping first occurrence order."""
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique


def group_from_last2(last2: object) -> str | None:
    """Bicho group (1-25) for a two-digit ending; "00" belongs to group 25."""
    digits = only_digits(last2)
    if not digits:
        return None
    number = int(digits[-2:])
    if number == 0:
        return "25"
    return str(math.ceil(number / 4))


def normalize_base(raw: object) -> str | None:
    """Return the 4-digit working form of a base palpite, or None if unusable.

    Longer inputs keep their last four digits. A 3-digit centena is padded
    with a leading zero, so "123" is sliced as "0123".
    """
    digits = only_digits(raw)
    if len(digits) < MIN_BASE_DIGITS:
        return None
    return digits[-BASE_WIDTH:].zfill(BASE_WIDTH)


def _derive_one(base: str, target: Modality) -> str | None:
    if target in (Modality.MILHAR, Modality.MILHAR_INV, Modality.MILHAR_E_CT):
        return base
    if target in (Modality.CENTENA, Modality.CENTENA_INV):
        return base[1:4]
    if target in (Modality.CENTENA_ESQUERDA, Modality.CENTENA_INV_ESQ):
        return base[0:3]
    if target is Modality.DEZENA:
        return base[2:4]
    if target is Modality.DEZENA_ESQ:
        return base[0:2]
    if target is Modality.DEZENA_MEIO:
        return base[1:3]
    if target is Modality.UNIDADE:
        return base[3]
    return group_from_last2(base[2:4])


def _fits_target(value: str, target: Modality) -> bool:
    if not value.isdigit():
        return False
    if target.is_group:
        return 1 <= int(value) <= 25
    return len(value) == target.width


def derive_valendo_palpites(base_numbers: Sequence[object] | None, target_modality: object) -> list[str]:
    """Derive the target-modality palpites of a valendo line from its base numbers.

    Returns an empty list for an empty/unusable base or an unsupported target.
    """
    target = Modality.from_label(target_modality)
    if target is None:
        logger.debug("No valendo derivation for target %r", target_modality)
        return []

    bases: list[str] = []
    for raw in unique_in_order(only_digits(raw) for raw in base_numbers or []):
        base = normalize_base(raw)
        if base is not None:
            bases.append(base)
    if not bases:
        return []

    derived = [_derive_one(base, target) for base in bases]
    return [value for value in unique_in_order(value for value in derived if value) if _fits_target(value, target)]


@dataclass(frozen=True)
class ValendoBase:
    """Base numbers locked for a valendo session."""

    locked: bool
    base_digits: int | None
    base_palpites: tuple[str, ...]


def build_valendo_base(apostas: Sequence[Sequence[object]]) -> ValendoBase:
    """Pick the valendo base from the palpites of a repeated bet.

    Milhares (4 digits) win over centenas (3 digits); other widths never form
    a base. The base is locked when the bet already has more than one line.
    """
    palpites = [only_digits(palpite) for aposta in apostas for palpite in aposta]
    base4 = tuple(palpite for palpite in palpites if len(palpite) == 4)
    base3 = tuple(palpite for palpite in palpites if len(palpite) == 3)

    if base4:
        base_digits: int | None = 4
        base_palpites = base4
    elif base3:
        base_digits = 3
        base_palpites = base3
    else:
        base_digits = None
        base_palpites = ()

    return ValendoBase(locked=len(apostas) > 1, base_digits=base_digits, base_palpites=base_palpites)
