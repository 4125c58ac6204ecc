# src/confstrata/sources/files.py
"""
Descoberta e carregamento de arquivos de configuração.

A configuração baseada em arquivos é resolvida a partir de dois layouts:
    - arquivos planos em `config_dir` (ex.: `db.yml`, `db.production.yml`)
    - arquivos dentro de `config_dir/<env>/` (ex.: `production/extra.yml`)

Política de ordenação:
    - resultados do layout plano precedem os do subdiretório de ambiente
    - dentro de cada diretório, ordem alfabética determinística
    - arquivos com sufixo de ambiente (`*.<env>.*`) vêm após os demais
    - arquivos com sufixo de outro ambiente são ignorados

Decisões arquiteturais:
    - Diretórios ausentes não são erro (contribuem com zero arquivos)
    - Arquivos vazios são interpretados como dicionários vazios
    - Os arquivos são mesclados pelo Merge Engine, da esquerda para a direita,
      sem a fonte implícita de ambiente

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não valida schema
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml  # PyYAML

from confstrata.core.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from confstrata.core.merge import merge


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}
CONFIG_SUFFIXES = YAML_SUFFIXES | JSON_SUFFIXES

# Nomes com dois pontos carregam um sufixo qualificador (ex.: `db.test.yml`).
_QUALIFIED_NAME = re.compile(r"\w*\.\w*\.")


def load_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados:
        - YAML (.yaml, .yml), via `yaml.safe_load`
        - JSON (.json)

    Invariantes:
        - O retorno é sempre um dicionário
        - Arquivos vazios resultam em `{}`

    Args:
        path (Union[str, Path]): Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo for sintaticamente inválido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix in YAML_SUFFIXES:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

        elif suffix in JSON_SUFFIXES:
            with path.open("r", encoding="utf-8") as f:
                text = f.read()
            data = json.loads(text) if text.strip() else None

        else:
            raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Não foi possível interpretar {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__} ({path})"
        )

    return data


def _list_directory(directory: Path, env: str) -> List[Path]:
    if not directory.is_dir():
        return []

    marker = f".{env}."
    names = sorted(
        p.name
        for p in directory.iterdir()
        if p.is_file() and p.suffix in CONFIG_SUFFIXES
    )
    names = [n for n in names if not _QUALIFIED_NAME.search(n) or marker in n]

    # sort estável: preserva a ordem alfabética dentro de cada grupo
    names.sort(key=lambda n: marker in n)

    return [directory / n for n in names]


def discover_files(config_dir: Union[str, Path], env: str) -> List[Path]:
    """
    Lista os arquivos de configuração aplicáveis ao ambiente, em ordem de merge.

    Args:
        config_dir (Union[str, Path]): Diretório base de configuração.
        env (str): Nome do ambiente corrente (ex.: `development`).

    Returns:
        List[Path]: Arquivos do layout plano seguidos dos arquivos de `config_dir/<env>`.
    """
    base = Path(config_dir)
    files = _list_directory(base, env) + _list_directory(base / env, env)

    if not files:
        logger.debug("Nenhum arquivo de configuração encontrado em %s (env=%s)", base, env)

    return files


def load_files(config_dir: Union[str, Path], env: str) -> Dict[str, Any]:
    """
    Descobre, interpreta e mescla os arquivos de configuração do ambiente.

    Cada arquivo é mesclado sobre o resultado dos anteriores; o primeiro
    arquivo a definir uma chave fixa o tipo usado nas coerções seguintes.
    """
    documents = []
    for path in discover_files(config_dir, env):
        logger.debug("Carregando arquivo de configuração: %s", path)
        data = load_file(path)
        if data:
            documents.append(data)

    return merge({}, *documents, include_environ=False)
