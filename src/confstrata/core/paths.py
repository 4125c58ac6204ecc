# src/confstrata/core/paths.py
"""
Acesso por caminho pontuado sobre a configuração mesclada.

Um caminho pode ser informado como string pontuada (`"app.port"`) ou como
tupla de segmentos (`("app", "port")`, formato da Canonical Key Path).

Invariantes:
    - `get_path` nunca levanta exceção para caminhos ausentes
    - `set_path` cria dicionários intermediários conforme necessário
    - Intermediários que não são mapeamentos são substituídos por `{}`
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Sequence, Tuple, Union


PathLike = Union[str, Sequence[str]]


def _parts(path: PathLike) -> Tuple[str, ...]:
    if isinstance(path, str):
        return tuple(path.split(".")) if path else ()
    return tuple(path)


def get_path(data: Mapping, path: PathLike, default: Any = None) -> Any:
    """
    Retorna o valor no caminho informado ou `default` se ausente.

    Um valor `None` armazenado explicitamente é retornado como `None`
    (não é confundido com ausência).
    """
    parts = _parts(path)
    if not parts:
        return default

    current: Any = data
    for part in parts:
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def set_path(data: Dict[str, Any], path: PathLike, value: Any) -> None:
    """
    Escreve `value` no caminho informado, mutando `data` in-place.

    Raises:
        ValueError: Se o caminho for vazio.
    """
    parts = _parts(path)
    if not parts:
        raise ValueError("Caminho de configuração vazio")

    current = data
    for part in parts[:-1]:
        nxt = current.get(part)
        if not isinstance(nxt, dict):
            nxt = {}
            current[part] = nxt
        current = nxt
    current[parts[-1]] = value
