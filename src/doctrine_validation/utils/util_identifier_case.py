# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identifier case conversion between underscore_case and camelCase.

Both conversions are pure and idempotent on their own output. They are not
inverses of each other for identifiers that do not already follow the
source convention; ``to_camel_case(to_snake_case(x)) == x`` only holds for
well-formed camelCase input.

Example:
    >>> to_snake_case("userName")
    'user_name'
    >>> to_camel_case("user_name")
    'userName'
    >>> to_snake_case("Name")
    '_name'
"""

from __future__ import annotations

import re
from typing import Final

from doctrine_validation.enums.enum_naming_scheme import EnumNamingScheme

_UPPERCASE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([A-Z])")
_UNDERSCORE_PATTERN: Final[re.Pattern[str]] = re.compile(r"_([a-z0-9])")


def to_snake_case(identifier: str) -> str:
    """Insert ``_`` before every upper-case ASCII letter and lower it.

    A leading upper-case letter also gains an underscore (``"Name"`` becomes
    ``"_name"``).
    """
    return _UPPERCASE_PATTERN.sub(lambda match: "_" + match.group(1).lower(), identifier)


def to_camel_case(identifier: str) -> str:
    """Collapse every ``_`` followed by ``[a-z0-9]`` into that character upper-cased.

    Digits stay as they are, so collapsing ``"a__1"`` exposes a new ``_1``;
    the substitution repeats until the result is stable (``"a1"``).
    """
    converted = identifier
    while True:
        collapsed = _UNDERSCORE_PATTERN.sub(lambda match: match.group(1).upper(), converted)
        if collapsed == converted:
            return converted
        converted = collapsed


def convert_identifier(identifier: str, scheme: EnumNamingScheme) -> str:
    """Convert ``identifier`` to the given naming scheme."""
    if scheme == EnumNamingScheme.CAMEL:
        return to_camel_case(identifier)
    return to_snake_case(identifier)


__all__: list[str] = [
    "convert_identifier",
    "to_camel_case",
    "to_snake_case",
]
