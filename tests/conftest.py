# tests/conftest.py
"""
Fixtures compartilhados para testes do confstrata.

Este módulo define fixtures reutilizáveis que fornecem:
- um snapshot de ambiente isolado (dict) no lugar de `os.environ`
- conteúdos YAML semelhantes ao uso real de uma aplicação
- uma fábrica para montar árvores de configuração em `tmp_path`

Decisões arquiteturais:
    - O ambiente é sempre injetado; nenhum teste muta `os.environ`
    - Arquivos são escritos apenas em diretórios temporários do pytest

Invariantes:
    - Fixtures são determinísticas e isoladas
    - Nenhuma fixture depende de ordem de execução
"""

from pathlib import Path
from typing import Callable, Dict

import pytest


# =====================================================
# Ambiente
# =====================================================

@pytest.fixture
def environ() -> Dict[str, str]:
    """
    Snapshot de ambiente mínimo para testes.

    Representa o ambiente do processo com apenas o nome do ambiente
    corrente definido, permitindo que cada teste adicione as variáveis
    de que precisa sem vazar estado entre testes.

    Returns:
        Dict[str, str]: Ambiente injetável com `CONFSTRATA_ENV=test`.
    """
    return {"CONFSTRATA_ENV": "test"}


# =====================================================
# Arquivos de configuração
# =====================================================

@pytest.fixture
def app_defaults_yaml() -> str:
    """
    YAML de defaults semelhante a um `config/app.yml` real.

    Define os tipos de referência (bool, int, str) usados pelas coerções
    de variáveis de ambiente nos testes de integração.
    """
    return """\
app:
  test: true
  port: 3000
  version: "1.0.0"
"""


@pytest.fixture
def database_defaults_yaml() -> str:
    return """\
database:
  username: test
  port: 1234
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Fábrica que materializa uma árvore de configuração em `tmp_path / "config"`.

    Recebe um mapeamento de caminho relativo → conteúdo textual e devolve
    o diretório de configuração criado. Subdiretórios são criados conforme
    necessário (ex.: `"production/extra.yml"`).

    Returns:
        Callable[[Dict[str, str]], Path]: Função que escreve os arquivos.
    """
    config_dir = tmp_path / "config"

    def _write(files: Dict[str, str]) -> Path:
        config_dir.mkdir(exist_ok=True)
        for relative, content in files.items():
            target = config_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return config_dir

    return _write
