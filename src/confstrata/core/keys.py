# src/confstrata/core/keys.py
"""
Normalização de chaves de fontes de configuração.

Chaves brutas (ex.: `APP__DATABASE__HOST`, `!!APP_ENV`, `server`) são
convertidas em uma Canonical Key Path: uma tupla de segmentos em camel-case.

Regras de normalização:
    1. remover todo caractere não-palavra (`\\W`, ASCII)
    2. separar por `__` (duplo underscore codifica aninhamento)
    3. descartar segmentos vazios
    4. converter cada segmento para camel-case

Invariantes:
    - Chaves que normalizam para o mesmo caminho apontam para o mesmo destino
    - Segmentos nunca contêm `.`, portanto o caminho pontuado é reversível
"""

from __future__ import annotations

import re
from typing import Any, Tuple


KeyPath = Tuple[str, ...]

NESTING_SEPARATOR = "__"

_NON_WORD = re.compile(r"\W", re.ASCII)

# Palavras: siglas antes de palavra capitalizada, palavras, siglas, dígitos.
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def camel_case(segment: str) -> str:
    """Converte um segmento para camel-case (`APP_ENV` -> `appEnv`)."""
    words = _WORDS.findall(segment)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(w.lower().capitalize() for w in tail)


def key_path(raw_key: Any) -> KeyPath:
    """
    Calcula a Canonical Key Path de uma chave bruta.

    Chaves não textuais (ex.: inteiros vindos de YAML) são convertidas
    com `str` antes da normalização. O resultado pode ser vazio quando a
    chave não contém nenhum caractere de palavra.

    Exemplos:
        - `"!!APP_ENV"`   -> `("appEnv",)`
        - `"APP____NAME"` -> `("app", "name")`
        - `"database"`    -> `("database",)`
    """
    cleaned = _NON_WORD.sub("", str(raw_key))
    segments = (camel_case(s) for s in cleaned.split(NESTING_SEPARATOR) if s)
    return tuple(s for s in segments if s)
