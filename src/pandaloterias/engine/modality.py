"""Bet modality vocabulary and free-text label resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Modality(str, Enum):
    """Canonical bet modalities handled by the parser and the valendo engine."""

    MILHAR = "MILHAR"
    MILHAR_INV = "MILHAR INV"
    MILHAR_E_CT = "MILHAR E CT"
    CENTENA = "CENTENA"
    CENTENA_INV = "CENTENA INV"
    CENTENA_ESQUERDA = "CENTENA ESQUERDA"
    CENTENA_INV_ESQ = "CENTENA INV ESQ"
    DEZENA = "DEZENA"
    DEZENA_ESQ = "DEZENA ESQ"
    DEZENA_MEIO = "DEZENA MEIO"
    UNIDADE = "UNIDADE"
    GRUPO = "GRUPO"

    @property
    def is_group(self) -> bool:
        return self is Modality.GRUPO

    @property
    def width(self) -> int:
        """Digit width of a palpite in this modality (GRUPO is displayed with 2)."""
        if self.value.startswith("MILHAR"):
            return 4
        if self.value.startswith("CENTENA"):
            return 3
        if self.value.startswith("DEZENA") or self is Modality.GRUPO:
            return 2
        return 1

    @classmethod
    def from_label(cls, label: object) -> Modality | None:
        """Exact lookup after uppercasing and collapsing whitespace."""
        if isinstance(label, Modality):
            return label
        normalized = " ".join(str(label or "").upper().split())
        try:
            return cls(normalized)
        except ValueError:
            return None


@dataclass(frozen=True)
class BetShape:
    """How raw text is cut into palpites for a modality."""

    chunk_size: int
    is_group: bool = False


DEFAULT_ALIASES: dict[str, Modality] = {
    "GP": Modality.GRUPO,
    "GRP": Modality.GRUPO,
    "DZ": Modality.DEZENA,
    "CT": Modality.CENTENA,
    "MC": Modality.MILHAR,
    "UN": Modality.UNIDADE,
    "U": Modality.UNIDADE,
}

# Family keywords checked by substring containment, highest priority first.
FAMILY_KEYWORDS: tuple[Modality, ...] = (
    Modality.MILHAR,
    Modality.CENTENA,
    Modality.DEZENA,
    Modality.UNIDADE,
    Modality.GRUPO,
)

SMART_INPUT_KEYWORDS = (
    "MILHAR",
    "CENTENA",
    "DEZENA",
    "UNIDADE",
    "GRUPO",
    "MC",
    "M C",
    "MILHAR E CENTENA",
)

_TOKEN_RE = re.compile(r"[A-Z0-9]+")
_HYBRID_MC_RE = re.compile(r"\bM\s*[-/]?\s*C\b")


class ModalityResolver:
    """Resolve user/admin modality labels ("GP", "M C", "MILHAR E CT") to a Modality.

    Milhar keywords win over every other alias so that "milhar e centena"
    combo labels are never read as a 3-digit centena.
    """

    def __init__(self, aliases: Mapping[str, Modality | str] | None = None) -> None:
        source = DEFAULT_ALIASES if aliases is None else aliases
        self.aliases: dict[str, Modality] = {}
        for key, value in source.items():
            modality = Modality.from_label(value)
            if modality is None:
                raise ValueError(f"Alias '{key}' points to unknown modality '{value}'.")
            self.aliases[str(key).strip().upper()] = modality

    def resolve(self, raw_label: object) -> Modality | None:
        if isinstance(raw_label, Modality):
            return Modality.MILHAR if raw_label.value.startswith("MILHAR") else raw_label
        label = str(raw_label if raw_label is not None else "").upper().strip()
        tokens = _TOKEN_RE.findall(label)

        if "MILHAR" in tokens or "MC" in tokens or _HYBRID_MC_RE.search(label):
            return Modality.MILHAR

        for token in tokens:
            if len(token) < 2 and token != "U":
                continue
            if token in self.aliases:
                return self.aliases[token]

        exact = Modality.from_label(label)
        if exact is not None:
            return exact

        for family in FAMILY_KEYWORDS:
            if family.value in label:
                return family

        logger.debug("Unsupported modality label: %r", raw_label)
        return None

    def resolve_shape(self, raw_label: object) -> BetShape | None:
        modality = self.resolve(raw_label)
        if modality is None:
            return None
        return shape_for(modality)


def shape_for(modality: Modality) -> BetShape:
    """Return the parsing shape of a canonical modality."""
    if modality.is_group:
        return BetShape(chunk_size=0, is_group=True)
    return BetShape(chunk_size=modality.width)


_DEFAULT_RESOLVER = ModalityResolver()


def resolve_modality(raw_label: object) -> Modality | None:
    """Resolve a free-text label with the default alias table."""
    return _DEFAULT_RESOLVER.resolve(raw_label)


def resolve_bet_shape(raw_label: object) -> BetShape | None:
    return _DEFAULT_RESOLVER.resolve_shape(raw_label)


def is_smart_input_supported(modalidade: object) -> bool:
    """Return True when the paste-to-numbers input should be offered for a label."""
    if isinstance(modalidade, Modality):
        return True
    label = str(modalidade or "").upper()
    return any(keyword in label for keyword in SMART_INPUT_KEYWORDS)
