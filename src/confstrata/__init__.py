# src/confstrata/__init__.py
"""
confstrata — materialização de configuração em camadas.

A configuração efetiva é construída sobrepondo, em ordem de precedência:
    1. defaults (o primeiro documento mesclado)
    2. arquivos YAML/JSON descobertos por convenção de nome e ambiente
    3. override JSON e variáveis de ambiente, coagidos ao tipo existente

Arquitetura em alto nível:
    - core.merge   → Merge Engine (normalização de chaves + coerção)
    - core.paths   → acesso por caminho pontuado
    - sources      → arquivos, `.env` e ambiente do processo
    - config       → orquestração (`Config`, `default_config`)

Limites explícitos:
    - Não valida schema
    - Não mescla listas elemento a elemento
    - Não resolve configuração de fontes remotas
"""

from confstrata.config import Config, default_config
from confstrata.core.coercion import CoercionKind, coerce, coercion_kind
from confstrata.core.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from confstrata.core.keys import key_path
from confstrata.core.merge import merge, merge_source
from confstrata.core.paths import get_path, set_path

__version__ = "0.1.0"

__all__ = [
    "CoercionKind",
    "Config",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "coerce",
    "coercion_kind",
    "default_config",
    "get_path",
    "key_path",
    "merge",
    "merge_source",
    "set_path",
]
