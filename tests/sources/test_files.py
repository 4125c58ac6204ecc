# tests/sources/test_files.py
"""
Testes da descoberta e do carregamento de arquivos de configuração.

Os testes asseguram que:
- arquivos de ambiente (`*.<env>.yml`) são mesclados após os genéricos
- arquivos de `config/<env>/` são mesclados após o layout plano
- arquivos qualificados para outros ambientes são ignorados
- diretórios ausentes não são erro
- conteúdos inválidos geram exceções tipadas

Decisões arquiteturais:
    - Arquivos são escritos em `tmp_path` via fixture `write_config`
    - A precedência é validada pelo valor final de chaves compartilhadas

Limites explícitos:
    - Não valida variáveis de ambiente
    - Não valida a classe `Config`
"""

from pathlib import Path

import pytest

from confstrata.core.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from confstrata.sources.files import discover_files, load_file, load_files


def test_discovery_order_flat_then_env_suffix_then_env_dir(write_config):
    """
    Verifica o cenário de precedência de arquivos.

    Dado `db.yml`, `db.test.yml` e `test/extra.yml`, a ordem de merge é
    exatamente `db.yml`, `db.test.yml`, `extra.yml`.
    """
    config_dir = write_config(
        {
            "db.yml": "db:\n  host: base\n",
            "db.test.yml": "db:\n  host: env-suffix\n",
            "test/extra.yml": "db:\n  host: env-dir\n",
        }
    )

    files = discover_files(config_dir, "test")

    assert files == [
        config_dir / "db.yml",
        config_dir / "db.test.yml",
        config_dir / "test" / "extra.yml",
    ]
    assert load_files(config_dir, "test") == {"db": {"host": "env-dir"}}


def test_discovery_sorts_alphabetically_within_tier(write_config):
    config_dir = write_config(
        {
            "b.yml": "",
            "a.yaml": "",
            "b.test.yml": "",
            "a.test.yml": "",
            "c.json": "",
        }
    )

    names = [p.name for p in discover_files(config_dir, "test")]

    assert names == ["a.yaml", "b.yml", "c.json", "a.test.yml", "b.test.yml"]


def test_discovery_ignores_other_environments_and_other_extensions(write_config):
    config_dir = write_config(
        {
            "app.yml": "",
            "app.production.yml": "",
            "app.development.yml": "",
            "notes.txt": "",
            "production/extra.yml": "",
        }
    )

    assert discover_files(config_dir, "test") == [config_dir / "app.yml"]


def test_missing_directory_contributes_nothing(tmp_path: Path):
    missing = tmp_path / "nope"
    assert discover_files(missing, "test") == []
    assert load_files(missing, "test") == {}


@pytest.mark.parametrize(
    "env, expected",
    [("test", "test"), ("development", "default"), ("production", "production")],
)
def test_env_suffixed_files_override_per_environment(write_config, env, expected):
    config_dir = write_config(
        {
            "app.yml": "app:\n  test: default\n",
            "app.test.yml": "app:\n  test: test\n",
            "app.production.yml": "app:\n  test: production\n",
        }
    )
    assert load_files(config_dir, env)["app"]["test"] == expected


@pytest.mark.parametrize(
    "env, expected",
    [("test", "test"), ("development", "default"), ("production", "production")],
)
def test_env_directory_files_override_per_environment(write_config, env, expected):
    config_dir = write_config(
        {
            "app.yml": "app:\n  test: default\n",
            "test/app.yml": "app:\n  test: test\n",
            "production/app.yml": "app:\n  test: production\n",
        }
    )
    assert load_files(config_dir, env)["app"]["test"] == expected


def test_later_files_are_coerced_to_earlier_types(write_config):
    config_dir = write_config(
        {
            "app.yml": "app:\n  port: 3000\n  debug: false\n",
            "app.test.yml": "app:\n  port: '8080'\n  debug: 'true'\n",
        }
    )
    assert load_files(config_dir, "test") == {"app": {"port": 8080, "debug": True}}


def test_load_file_json_and_empty_documents(write_config):
    config_dir = write_config(
        {
            "a.json": '{"app": {"name": "x"}}',
            "empty.yml": "",
            "empty.json": "   ",
        }
    )
    assert load_file(config_dir / "a.json") == {"app": {"name": "x"}}
    assert load_file(config_dir / "empty.yml") == {}
    assert load_file(config_dir / "empty.json") == {}


def test_load_file_missing_raises(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError):
        load_file(tmp_path / "missing.yml")


def test_load_file_unsupported_format_raises(tmp_path: Path):
    p = tmp_path / "config.toml"
    p.write_text("a = 1\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_file(p)


def test_load_file_non_mapping_root_raises(tmp_path: Path):
    p = tmp_path / "list.yml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_file(p)


def test_load_file_invalid_syntax_raises(tmp_path: Path):
    bad_yaml = tmp_path / "bad.yml"
    bad_yaml.write_text("app: [unclosed\n", encoding="utf-8")
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{ invalid_json = 1", encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_file(bad_yaml)
    with pytest.raises(ConfigParseError):
        load_file(bad_json)
