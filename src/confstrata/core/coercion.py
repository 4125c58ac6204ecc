# src/confstrata/core/coercion.py
"""
Regra de coerção de tipos do Merge Engine.

O tipo alvo de uma coerção é determinado pelo valor **já existente** no
destino, nunca pelo tipo declarado da fonte. A primeira fonte a introduzir
uma chave (normalmente os defaults) define o contrato de tipo para todos
os overrides posteriores daquela chave.

Tabela de coerção:
    - bool        → True se o texto da fonte for `true` ou `1` (case-insensitive)
    - int / float → parse numérico com semântica de prefixo (`nan` se inválido)
    - str         → representação textual (`true`, `null`, `1,2`, `3`)
    - demais      → valor repassado sem coerção (listas são copiadas)

Princípios fundamentais:
    - Coerção é best-effort e nunca levanta exceção
    - `bool` é verificado antes de números (bool é subclasse de int)

Limites explícitos:
    - Não valida o resultado da coerção
    - Não converte mapeamentos (mapeamentos são mesclados, não coagidos)
"""

from __future__ import annotations

import math
import re
from copy import deepcopy
from enum import Enum
from typing import Any


class CoercionKind(str, Enum):
    """
    Classificação do valor de destino que dirige a coerção.

    Valores:
        - BOOLEAN: destino é `bool`
        - NUMBER: destino é `int` ou `float`
        - STRING: destino é `str`
        - PASSTHROUGH: destino ausente, `None`, lista, dicionário ou outro tipo
    """
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    PASSTHROUGH = "passthrough"


_TRUTHY = re.compile(r"true|1", re.IGNORECASE)

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def _to_text(value: Any) -> str:
    """
    Representação textual usada pelas coerções BOOLEAN e STRING.

    Segue a forma textual de valores de configuração em YAML/JSON:
        - `True` / `False` -> `"true"` / `"false"`
        - `None` -> `"null"`
        - floats inteiros sem `.0` (`3.0` -> `"3"`), `nan` -> `"NaN"`
        - listas unidas por vírgula, elemento a elemento (`None` vira `""`)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _to_text(item) for item in value)
    return str(value)


def coercion_kind(destination_value: Any) -> CoercionKind:
    if isinstance(destination_value, bool):
        return CoercionKind.BOOLEAN
    if isinstance(destination_value, (int, float)):
        return CoercionKind.NUMBER
    if isinstance(destination_value, str):
        return CoercionKind.STRING
    return CoercionKind.PASSTHROUGH


def parse_float(value: Any) -> float:
    """
    Interpreta o prefixo numérico de um valor como float.

    Espaços iniciais são ignorados e qualquer conteúdo após o numeral é
    descartado (`"8080/tcp"` -> `8080.0`). Conteúdo não numérico no início
    produz `nan`.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    match = _FLOAT_PREFIX.match(_to_text(value).lstrip())
    if match is None:
        return math.nan

    return float(match.group(0).replace("Infinity", "inf"))


def coerce(value: Any, destination_value: Any) -> Any:
    """
    Converte `value` para o tipo do valor atualmente presente no destino.

    Para destinos `int`, resultados finitos e inteiros são devolvidos como
    `int` (ex.: porta `3000` sobrescrita por `"8000"` permanece inteira);
    nos demais casos o resultado numérico é `float`, incluindo `nan`.

    Args:
        value (Any): Valor vindo da fonte.
        destination_value (Any): Valor atual no destino (ou None se ausente).

    Returns:
        Any: Valor convertido. Nunca levanta exceção.
    """
    kind = coercion_kind(destination_value)

    if kind is CoercionKind.BOOLEAN:
        return _TRUTHY.fullmatch(_to_text(value)) is not None

    if kind is CoercionKind.NUMBER:
        number = parse_float(value)
        if isinstance(destination_value, int) and math.isfinite(number) and number.is_integer():
            return int(number)
        return number

    if kind is CoercionKind.STRING:
        return _to_text(value)

    return deepcopy(value)
