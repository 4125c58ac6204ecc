# src/confstrata/config.py
"""
Config — Configuração materializada do confstrata.

Este módulo define a classe `Config`, que orquestra a materialização da
configuração efetiva de uma aplicação:

    1. bootstrap de `.env` no ambiente (sem sobrescrever variáveis existentes)
    2. descoberta e merge de arquivos de `config_dir` para o ambiente corrente
    3. merge do override JSON e das variáveis de ambiente (maior precedência)

Variáveis de bootstrap:
    - CONFSTRATA_ENV            → ambiente corrente (padrão: `development`)
    - CONFSTRATA_CONFIG_DIR     → diretório de configuração (padrão: `<base_dir>/config`)
    - CONFSTRATA_CONFIG_PREFIX  → prefixo das variáveis consideradas (padrão: vazio)
    - CONFSTRATA_CONFIG         → override JSON único

Princípios fundamentais:
    - A configuração efetiva é um dicionário puro
    - O ambiente é injetável; `os.environ` é apenas o padrão
    - Toda lógica de merge e coerção vive em `confstrata.core.merge`
"""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Union

from confstrata.core.keys import key_path
from confstrata.core.merge import merge
from confstrata.core.paths import PathLike, get_path, set_path
from confstrata.sources.environment import (
    OVERRIDE_VARIABLE,
    environment_source,
    load_dotenv_file,
)
from confstrata.sources.files import load_files


logger = logging.getLogger(__name__)

ENV_VARIABLE = "CONFSTRATA_ENV"
CONFIG_DIR_VARIABLE = "CONFSTRATA_CONFIG_DIR"
PREFIX_VARIABLE = "CONFSTRATA_CONFIG_PREFIX"

DEFAULT_ENV = "development"

_MISSING = object()


class Config:
    """
    Configuração efetiva de uma aplicação.

    Campos canônicos:
    - env: ambiente corrente
    - config_dir: diretório onde os arquivos foram procurados
    - prefix: prefixo (maiúsculo) usado para filtrar variáveis de ambiente

    O conteúdo mesclado é acessado por caminho pontuado via `get`/`set`.
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        base_dir: Optional[Union[str, Path]] = None,
        dotenv: bool = True,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        base = Path.cwd() if base_dir is None else Path(base_dir)

        if dotenv:
            load_dotenv_file(base / ".env", self._environ)

        self.env: str = self._lookup(ENV_VARIABLE, DEFAULT_ENV)
        self.config_dir = Path(self._lookup(CONFIG_DIR_VARIABLE, str(base / "config")))
        self.prefix: str = self._lookup(PREFIX_VARIABLE, "").upper()

        files = load_files(self.config_dir, self.env)
        source = environment_source(self._environ, self.prefix, OVERRIDE_VARIABLE)
        self._data: Dict[str, Any] = merge(files, source, include_environ=False)

        # valores de bootstrap resolvidos (incluindo defaults) ficam acessíveis via `get`
        set_path(self._data, key_path(ENV_VARIABLE), self.env)
        set_path(self._data, key_path(CONFIG_DIR_VARIABLE), str(self.config_dir))
        set_path(self._data, key_path(PREFIX_VARIABLE), self.prefix)

        logger.debug("Configuração materializada (env=%s, dir=%s)", self.env, self.config_dir)

    def _lookup(self, key: str, default: str) -> str:
        # valores vazios contam como ausentes
        return self._environ.get(key) or default

    # -----------------------------
    # Ambiente
    # -----------------------------
    def environment(self, *envs: str) -> bool:
        """Retorna True se o ambiente corrente é um dos informados."""
        return self.env in envs

    # -----------------------------
    # Acesso por caminho pontuado
    # -----------------------------
    def get(self, key: PathLike, default: Any = None) -> Any:
        return get_path(self._data, key, default)

    def set(self, key: PathLike, value: Any) -> None:
        set_path(self._data, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna uma cópia profunda da configuração mesclada."""
        return deepcopy(self._data)

    def __contains__(self, key: PathLike) -> bool:
        return get_path(self._data, key, _MISSING) is not _MISSING

    def __repr__(self) -> str:
        return f"Config(env={self.env!r}, config_dir={str(self.config_dir)!r})"


@lru_cache(maxsize=None)
def default_config() -> Config:
    """
    Retorna a instância de `Config` do processo, construída na primeira chamada
    a partir de `os.environ` e do diretório de trabalho corrente.
    """
    return Config()
