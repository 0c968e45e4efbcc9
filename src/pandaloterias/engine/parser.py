"""Turn pasted free text (WhatsApp, Excel) into clean palpites."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .modality import ModalityResolver

if TYPE_CHECKING:
    from pandaloterias.config.schema import EngineConfig

logger = logging.getLogger(__name__)

ERROR_UNSUPPORTED_MODALITY = "MODALIDADE_NAO_SUPORTADA"
GROUP_MIN = 1
GROUP_MAX = 25
GROUP_PAD_WIDTH = 2

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_NON_DIGIT_RUN_RE = re.compile(r"[^0-9]+")


@dataclass(frozen=True)
class ParseMeta:
    """Counters describing one parse run."""

    discarded: int = 0
    total_processed: int = 0
    total_valid: int = 0
    is_group: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ParseResult:
    """Valid palpites plus parse metadata."""

    valid: list[str] = field(default_factory=list)
    meta: ParseMeta = field(default_factory=ParseMeta)

    @property
    def ok(self) -> bool:
        return self.meta.error is None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase shape stored in the bet draft."""
        return {
            "valid": list(self.valid),
            "meta": {
                "discarded": self.meta.discarded,
                "totalProcessed": self.meta.total_processed,
                "totalValid": self.meta.total_valid,
                "isGroup": self.meta.is_group,
                "error": self.meta.error,
            },
        }


class BetInputParser:
    """Parse raw text into fixed-width chunks or bounded grupo numbers.

    Fixed-width modalities (milhar/centena/dezena/unidade) ignore separators
    entirely and cut the digit stream left to right, so "26901234" yields
    ["2690", "1234"]. Grupo input is split on separators because 1-2 digit
    numbers have no unambiguous boundary when concatenated.
    Duplicates are kept in both modes.
    """

    def __init__(
        self,
        resolver: ModalityResolver | None = None,
        group_min: int = GROUP_MIN,
        group_max: int = GROUP_MAX,
        group_pad_width: int = GROUP_PAD_WIDTH,
    ) -> None:
        if group_min > group_max:
            raise ValueError("group_min cannot be greater than group_max.")
        if group_pad_width < 1:
            raise ValueError("group_pad_width must be >= 1.")
        self.resolver = resolver or ModalityResolver()
        self.group_min = group_min
        self.group_max = group_max
        self.group_pad_width = group_pad_width

    @classmethod
    def from_config(cls, config: EngineConfig) -> BetInputParser:
        return cls(
            resolver=ModalityResolver(config.aliases),
            group_min=config.group_min,
            group_max=config.group_max,
            group_pad_width=config.group_pad_width,
        )

    def parse(self, raw_text: object, modalidade: object) -> ParseResult:
        text = "" if raw_text is None else str(raw_text)
        if not text.strip():
            return ParseResult()

        shape = self.resolver.resolve_shape(modalidade)
        if shape is None:
            return ParseResult(meta=ParseMeta(error=ERROR_UNSUPPORTED_MODALITY))

        if shape.is_group:
            result = self._parse_group(text)
        else:
            result = self._parse_fixed_width(text, shape.chunk_size)

        if result.meta.discarded:
            logger.debug(
                "Discarded %d of input for %r (processed=%d, valid=%d)",
                result.meta.discarded,
                modalidade,
                result.meta.total_processed,
                result.meta.total_valid,
            )
        return result

    def _parse_group(self, text: str) -> ParseResult:
        tokens = [token for token in _NON_DIGIT_RUN_RE.split(text) if token]
        valid: list[str] = []
        discarded = 0
        max_len = len(str(self.group_max))
        for token in tokens:
            significant = token.lstrip("0")
            if len(significant) > max_len:
                discarded += 1
                continue
            value = int(significant or "0")
            if self.group_min <= value <= self.group_max:
                valid.append(str(value).zfill(self.group_pad_width))
            else:
                discarded += 1

        return ParseResult(
            valid=valid,
            meta=ParseMeta(
                discarded=discarded,
                total_processed=len(tokens),
                total_valid=len(valid),
                is_group=True,
            ),
        )

    @staticmethod
    def _parse_fixed_width(text: str, chunk_size: int) -> ParseResult:
        digits = _NON_DIGIT_RE.sub("", text)
        complete = len(digits) // chunk_size
        valid = [digits[index * chunk_size : (index + 1) * chunk_size] for index in range(complete)]
        leftover = len(digits) - complete * chunk_size

        return ParseResult(
            valid=valid,
            meta=ParseMeta(
                discarded=leftover,
                total_processed=math.ceil(len(digits) / chunk_size),
                total_valid=complete,
            ),
        )


_DEFAULT_PARSER = BetInputParser()


def parse_bet_input(raw_text: object, modalidade: object) -> ParseResult:
    """Parse pasted text for a modality label using the default parser."""
    return _DEFAULT_PARSER.parse(raw_text, modalidade)


def describe_discarded(
    result: ParseResult,
    modalidade: object = "",
    group_min: int = GROUP_MIN,
    group_max: int = GROUP_MAX,
) -> str | None:
    """Return the soft warning shown under the smart input, if any.

    Pass the grupo bounds of the parser that produced ``result`` when they
    differ from the defaults.
    """
    if result.meta.error == ERROR_UNSUPPORTED_MODALITY:
        return f'A modalidade "{modalidade}" não suporta a função Copiar e Colar.'
    if not result.meta.discarded:
        return None
    if result.meta.is_group:
        return f"{result.meta.discarded} número(s) inválido(s) (fora de {group_min}-{group_max}) foram ignorados."
    return f"{result.meta.discarded} dígito(s) sobrando no final foram ignorados (incompleto)."
