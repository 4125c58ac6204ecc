# src/confstrata/core/errors.py
"""
Exceções canônicas da camada de configuração do confstrata.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de arquivos de configuração.

O Merge Engine e as fontes baseadas em variáveis de ambiente **não**
levantam exceções para dados malformados: coerções inválidas produzem
valores best-effort (ex.: `nan`) e overrides JSON inválidos geram apenas
um warning. As exceções aqui definidas cobrem exclusivamente falhas
estruturais de arquivos.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção é levantada durante o merge de fontes

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não valida schema ou semântica de domínio
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Todas as exceções levantadas durante o carregamento de arquivos
    devem herdar desta classe, permitindo captura genérica por quem
    consome a biblioteca.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração solicitado
    explicitamente não existe.

    A descoberta automática de arquivos nunca levanta este erro:
    diretórios ausentes simplesmente não contribuem com arquivos.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de configuração
    não é um mapeamento.

    Invariantes:
        - O Merge Engine só recebe fontes do tipo dicionário
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando o conteúdo de um arquivo não pode ser
    interpretado (YAML ou JSON sintaticamente inválido).

    A exceção original do parser é preservada em `__cause__`.
    """
