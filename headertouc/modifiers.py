"""Decoding of CPF_* property flags into variable modifiers"""

import logging
import re
from typing import Callable, Iterable, Optional

from .types import VariableModifier

logger = logging.getLogger(__name__)

UnknownFlagSink = Callable[[str], None]


class ModifierDecoder:
    """Turns the flag comment of a declaration into VariableModifiers"""

    # Index of the flag list once a declaration is split on parentheses:
    # <decl> // 0x0028 (0x0004) [0x0000000000021002] ( CPF_Const | CPF_Native )
    FLAGS_SEGMENT = 3

    FLAG_MODIFIERS = {
        'CPF_Edit': VariableModifier.Edit,
        'CPF_Const': VariableModifier.Const,
        'CPF_EditConst': VariableModifier.EditConst,
        'CPF_EditConstArray': VariableModifier.EditConstArray,
        'CPF_EditInline': VariableModifier.EditInline,
        'CPF_EditInlineNotify': VariableModifier.EditInlineNotify,
        'CPF_Localized': VariableModifier.Localized,
        'CPF_Export': VariableModifier.Export,
        'CPF_ExportObject': VariableModifier.Export,
        'CPF_Transient': VariableModifier.Transient,
        'CPF_Native': VariableModifier.Native,
        'CPF_Net': VariableModifier.Net,
        'CPF_NoExport': VariableModifier.NoExport,
    }

    # Recognised, but with no UnrealScript counterpart
    INERT_FLAGS = frozenset({
        'CPF_Config',
        'CPF_Component',
        'CPF_NeedCtorLink',
    })

    # Modifiers that several flags collapse into
    UNIQUE_MODIFIERS = frozenset({VariableModifier.Export})

    @classmethod
    def flag_tokens(cls, declaration: str) -> list[str]:
        """Extract the flag tokens from a cleaned declaration"""
        segments = re.split(r'[()]', declaration)
        if len(segments) <= cls.FLAGS_SEGMENT:
            return []
        return [t for t in re.split(r'[ |]', segments[cls.FLAGS_SEGMENT]) if t]

    @classmethod
    def decode(cls, tokens: Iterable[str],
               on_unknown: Optional[UnknownFlagSink] = None) -> list[VariableModifier]:
        """Map flag tokens to modifiers in the order they appear.

        Unknown tokens are handed to ``on_unknown`` (or logged when no sink
        is given) and otherwise ignored.
        """
        modifiers = []
        for token in tokens:
            if token in cls.INERT_FLAGS:
                continue

            modifier = cls.FLAG_MODIFIERS.get(token)
            if modifier is None:
                if on_unknown is not None:
                    on_unknown(token)
                else:
                    logger.warning("Modifier '%s' not recognised.", token)
                continue

            if modifier in cls.UNIQUE_MODIFIERS and modifier in modifiers:
                continue
            modifiers.append(modifier)
        return modifiers
