"""Keyword configuration for Lingo.

Every keyword of the language has a role (``let``, ``print``, ``if``, ``else``,
``true``, ``false``, ``while``, ``for``) and a spelling chosen by the caller.
A :class:`KeywordConfig` maps roles to spellings; the lexer builds its keyword
table from it, so remapping ``let`` to ``var`` makes ``var`` the declaration
keyword and turns ``let`` back into a plain identifier.

Configurations can be built from a mapping (accepting both the bare role names
and the ``letKeyword``-style setting names), a JSON file, or ``LINGO_<ROLE>``
environment variables. The ``LINGODEBUG`` environment variable switches on the
token and AST dump performed by the command-line runner.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import json
import os
from dataclasses import dataclass, fields, replace

from lingolang.tokens import TokenType, is_identifier


# role name -> (dataclass field, token type)
ROLES = {
    "let": ("let", TokenType.LET),
    "print": ("print", TokenType.PRINT),
    "if": ("if_", TokenType.IF),
    "else": ("else_", TokenType.ELSE),
    "true": ("true", TokenType.TRUE),
    "false": ("false", TokenType.FALSE),
    "while": ("while_", TokenType.WHILE),
    "for": ("for_", TokenType.FOR),
}

ENV_PREFIX = "LINGO_"
DEBUG_ENV = "LINGODEBUG"


@dataclass(frozen=True)
class KeywordConfig:
    """
    Source spellings for each keyword role.
    """
    let: str = "let"
    print: str = "print"
    if_: str = "if"
    else_: str = "else"
    true: str = "true"
    false: str = "false"
    while_: str = "while"
    for_: str = "for"

    def __post_init__(self):
        seen = {}
        for role, (field_name, _) in ROLES.items():
            spelling = getattr(self, field_name)
            if not isinstance(spelling, str) or not is_identifier(spelling):
                raise ValueError(
                    f"Keyword spelling {spelling!r} for '{role}' is not a valid identifier"
                )
            if spelling in seen:
                raise ValueError(
                    f"Keyword spelling '{spelling}' is used for both "
                    f"'{seen[spelling]}' and '{role}'"
                )
            seen[spelling] = role

    @classmethod
    def from_mapping(cls, settings) -> "KeywordConfig":
        """
        Build a configuration from a mapping of roles to spellings.

        Keys may be bare role names (``let``) or setting names (``letKeyword``).
        Missing, ``None`` or empty spellings keep the English default.

        Raises:
            ValueError: If a key names no keyword role or a spelling is invalid.
        """
        overrides = {}
        for key, spelling in (settings or {}).items():
            role = key[:-len("Keyword")] if key.endswith("Keyword") else key
            if role not in ROLES:
                raise ValueError(f"Unknown keyword role '{key}'")
            if spelling:
                overrides[ROLES[role][0]] = spelling
        return cls(**overrides)

    @classmethod
    def from_file(cls, path: str) -> "KeywordConfig":
        """
        Load a configuration from a JSON object stored in ``path``.
        """
        with open(path, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError(f"Keyword configuration in {path} must be a JSON object")
        return cls.from_mapping(settings)

    def with_env(self, environ=None) -> "KeywordConfig":
        """
        Return a copy with ``LINGO_<ROLE>`` environment overrides applied.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for role, (field_name, _) in ROLES.items():
            spelling = environ.get(ENV_PREFIX + role.upper())
            if spelling:
                overrides[field_name] = spelling
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, environ=None) -> "KeywordConfig":
        """
        Build a configuration from defaults plus environment overrides.
        """
        return cls().with_env(environ)

    def keyword_table(self) -> dict[str, TokenType]:
        """
        Return the spelling -> token type table used by the lexer.
        """
        return {getattr(self, field_name): token_type for field_name, token_type in ROLES.values()}

    def as_dict(self) -> dict[str, str]:
        """
        Return the configuration keyed by role name.
        """
        names = {field_name: role for role, (field_name, _) in ROLES.items()}
        return {names[f.name]: getattr(self, f.name) for f in fields(self)}


DEFAULT_KEYWORDS = KeywordConfig()


def debug_enabled(environ=None) -> bool:
    """
    Return True when the ``LINGODEBUG`` environment variable is set.
    """
    environ = os.environ if environ is None else environ
    return bool(environ.get(DEBUG_ENV))
