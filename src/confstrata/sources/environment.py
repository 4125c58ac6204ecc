# src/confstrata/sources/environment.py
"""
Fontes de configuração derivadas do ambiente do processo.

Componentes:
    - `load_dotenv_file`     → bootstrap de pares `.env` sem sobrescrever o ambiente
    - `parse_override_blob`  → override JSON único vindo de uma variável designada
    - `prefixed_variables`   → subconjunto de variáveis filtrado por prefixo
    - `environment_source`   → fonte única entregue ao Merge Engine

Decisões arquiteturais:
    - O ambiente é sempre recebido por injeção (`environ`), nunca lido
      implicitamente, o que permite testes sem tocar em `os.environ`
    - JSON inválido no override gera um único warning e é ignorado

Limites explícitos:
    - Não realiza merge nem coerção (responsabilidade do Merge Engine)
    - Não levanta exceções por conteúdo malformado
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Union

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

OVERRIDE_VARIABLE = "CONFSTRATA_CONFIG"


def load_dotenv_file(path: Union[str, Path], environ: MutableMapping[str, str]) -> Dict[str, str]:
    """
    Copia os pares de um arquivo `.env` para `environ`.

    Variáveis já presentes em `environ` nunca são sobrescritas. Um arquivo
    ausente não é erro.

    Returns:
        Dict[str, str]: Pares efetivamente adicionados ao ambiente.
    """
    path = Path(path)
    if not path.is_file():
        return {}

    loaded: Dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        if value is None or key in environ:
            continue
        environ[key] = value
        loaded[key] = value

    logger.debug("%d variáveis carregadas de %s", len(loaded), path)
    return loaded


def parse_override_blob(raw: str, variable: str = OVERRIDE_VARIABLE) -> Dict[str, Any]:
    """
    Interpreta o override JSON de configuração.

    O conteúdo deve ser um objeto JSON. Conteúdo inválido (ou que não
    seja um objeto) gera um warning e é tratado como override vazio.
    """
    try:
        data = json.loads(raw)
    except ValueError:
        data = None

    if not isinstance(data, dict):
        logger.warning("%s environment variable is invalid JSON", variable)
        return {}

    return data


def prefixed_variables(environ: Mapping[str, str], prefix: str = "") -> Dict[str, str]:
    """
    Retorna as variáveis cujo nome começa com `prefix` (case-insensitive),
    com o prefixo removido da chave.
    """
    prefix = prefix.upper()
    return {
        key[len(prefix):]: value
        for key, value in environ.items()
        if key.upper().startswith(prefix)
    }


def environment_source(
    environ: Mapping[str, str],
    prefix: str = "",
    override_variable: str = OVERRIDE_VARIABLE,
) -> Dict[str, Any]:
    """
    Monta a fonte de ambiente entregue ao Merge Engine.

    Ordem de composição:
        1. override JSON de `override_variable` (se presente)
        2. variáveis filtradas por `prefix` (sobrescrevem chaves idênticas)

    Args:
        environ (Mapping[str, str]): Snapshot do ambiente.
        prefix (str): Prefixo de filtragem (vazio = todas as variáveis).
        override_variable (str): Nome da variável com o override JSON.

    Returns:
        Dict[str, Any]: Fonte plana/aninhada pronta para merge.
    """
    source: Dict[str, Any] = {}

    raw = environ.get(override_variable)
    if raw:
        source.update(parse_override_blob(raw, override_variable))

    source.update(prefixed_variables(environ, prefix))
    return source
