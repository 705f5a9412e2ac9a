"""
Integer Properties — чтение целых значений из строкового окружения

Значение по имени берётся из mapping (по умолчанию os.environ) и
разбирается через decode, поэтому допускаются "0x1F", "#1f", "017", "-5".
Отсутствующее имя или нераспознанное значение → default.
"""

import os
from typing import Mapping, Optional

from src.codec.parser import decode


def get_integer(
    name: Optional[str],
    default: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[int]:
    """
    Целое значение свойства name.

    Args:
        name: Имя свойства (None или пустое имя → default)
        default: Значение, если свойство отсутствует или не разбирается
        environ: Источник свойств (default: os.environ)

    Returns:
        Разобранное 32-битное значение либо default

    Examples:
        >>> get_integer("WORKERS", 4, {"WORKERS": "0x10"})
        16
        >>> get_integer("WORKERS", 4, {"WORKERS": "many"})
        4
    """
    if not name:
        return default

    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None:
        return default

    return decode(raw).value_or(default)
