# src/confstrata/core/merge.py
"""
Merge Engine do confstrata.

Este módulo implementa o algoritmo de merge-and-coerce que materializa a
configuração final a partir de um destino (accumulator) e uma sequência
ordenada de fontes.

Política de merge:
    - cada chave da fonte é normalizada em uma Canonical Key Path
    - mapeamento → merge recursivo sobre o valor atual (se for dict) ou `{}`
    - lista      → tratada como escalar (substituição total, sem recursão)
    - escalar    → coagido ao tipo do valor atual no destino e sobrescrito

Princípios fundamentais:
    - Fold sequencial: o efeito de cada fonte é visível para as seguintes
    - Last writer wins para escalares
    - Nenhum input é mutado; nenhuma estrutura da fonte é compartilhada
      com o resultado
    - O merge nunca levanta exceção por dados malformados

Decisões arquiteturais:
    - As variáveis de ambiente são uma fonte implícita final, injetável
      via `environ` (padrão: `os.environ`)
    - Não existe estado global neste módulo

Limites explícitos:
    - Não carrega arquivos
    - Não valida schema
    - Não mescla listas elemento a elemento
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Optional

from .coercion import coerce
from .keys import key_path
from .paths import get_path, set_path


logger = logging.getLogger(__name__)


def _merge_into(target: Dict[str, Any], source: Mapping) -> Dict[str, Any]:
    for raw_key, source_value in source.items():
        path = key_path(raw_key)
        if not path:
            logger.debug("Chave de configuração ignorada (sem caracteres válidos): %r", raw_key)
            continue

        current = get_path(target, path)

        # mapeamento -> merge recursivo
        if isinstance(source_value, Mapping):
            nested = dict(current) if isinstance(current, Mapping) else {}
            set_path(target, path, _merge_into(nested, source_value))
            continue

        # escalar (inclui listas) -> coerção pelo tipo do destino
        set_path(target, path, coerce(source_value, current))

    return target


def merge_source(destination: Mapping, source: Mapping) -> Dict[str, Any]:
    """
    Mescla uma única fonte no destino, produzindo uma nova configuração.

    Esta função aplica o algoritmo por fonte: para cada chave da fonte,
    na ordem de iteração do mapeamento, calcula a Canonical Key Path, lê
    o valor atual no resultado parcialmente mesclado e então mescla
    recursivamente (mapeamentos) ou coage e sobrescreve (escalares).

    Invariantes:
        - `destination` e `source` não são mutados
        - Chaves não tocadas pela fonte são preservadas
        - Chaves cujo caminho normalizado é vazio são ignoradas

    Args:
        destination (Mapping): Configuração base (accumulator).
        source (Mapping): Fonte plana ou aninhada.

    Returns:
        Dict[str, Any]: Nova configuração resultante.
    """
    return _merge_into(deepcopy(dict(destination)), source)


def merge(
    destination: Mapping,
    *sources: Mapping,
    environ: Optional[Mapping[str, str]] = None,
    include_environ: bool = True,
) -> Dict[str, Any]:
    """
    Mescla fontes no destino da esquerda para a direita.

    Política de resolução:
        - As fontes são aplicadas estritamente em ordem (fold sequencial)
        - As variáveis de ambiente (`environ`, padrão `os.environ`) são
          anexadas como fonte final, a menos que o mesmo objeto já esteja
          entre as fontes ou `include_environ` seja False
        - O tipo já presente no destino define a coerção de cada chave

    Invariantes:
        - O mesmo par (destino, fontes) sempre produz o mesmo resultado
        - Nenhum input é mutado
        - Nenhuma exceção é levantada por coerções inválidas

    Args:
        destination (Mapping): Configuração base (ex.: defaults).
        *sources (Mapping): Fontes ordenadas, aplicadas da esquerda para a direita.
        environ (Optional[Mapping[str, str]]): Snapshot de ambiente injetável.
        include_environ (bool): Se False, não anexa o ambiente como fonte implícita.

    Returns:
        Dict[str, Any]: Configuração mesclada.
    """
    ordered = list(sources)

    if include_environ:
        env = os.environ if environ is None else environ
        if not any(source is env for source in ordered):
            ordered.append(env)

    result = deepcopy(dict(destination))
    for source in ordered:
        _merge_into(result, source)
    return result
