"""Lookup de configuracao em lista ordenada de fontes.

A primeira fonte com valor nao vazio (apos strip) vence. As fontes sao
avaliadas sob demanda, entao fontes posteriores nao sao lidas quando uma
anterior ja resolveu.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence


def first_non_empty(candidates: Iterable[str | None]) -> str | None:
    """Retorna o primeiro candidato nao vazio, ja sem espacos."""
    for candidate in candidates:
        if candidate is None:
            continue
        stripped = candidate.strip()
        if stripped:
            return stripped
    return None


def read_env_chain(
    keys: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Le as variaveis `keys` na ordem e retorna o primeiro valor preenchido."""
    env = os.environ if environ is None else environ
    return first_non_empty(env.get(key) for key in keys)


__all__ = ["first_non_empty", "read_env_chain"]
