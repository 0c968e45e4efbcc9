"""Bet input parsing and valendo derivation."""

from .bichos import BICHOS_NOME, grupo_do_bicho, nome_bicho, nome_do_bicho
from .modality import (
    BetShape,
    Modality,
    ModalityResolver,
    is_smart_input_supported,
    resolve_bet_shape,
    resolve_modality,
)
from .parser import (
    ERROR_UNSUPPORTED_MODALITY,
    BetInputParser,
    ParseMeta,
    ParseResult,
    describe_discarded,
    parse_bet_input,
)
from .valendo import (
    ValendoBase,
    build_valendo_base,
    derive_valendo_palpites,
    group_from_last2,
    normalize_base,
)

__all__ = [
    "BICHOS_NOME",
    "ERROR_UNSUPPORTED_MODALITY",
    "BetInputParser",
    "BetShape",
    "Modality",
    "ModalityResolver",
    "ParseMeta",
    "ParseResult",
    "ValendoBase",
    "build_valendo_base",
    "derive_valendo_palpites",
    "describe_discarded",
    "group_from_last2",
    "grupo_do_bicho",
    "is_smart_input_supported",
    "nome_bicho",
    "nome_do_bicho",
    "normalize_base",
    "parse_bet_input",
    "resolve_bet_shape",
    "resolve_modality",
]
