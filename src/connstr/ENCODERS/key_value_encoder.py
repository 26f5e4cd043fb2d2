# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Encoding of key/value pairs into connection string text.
"""

# Characters that force a value to be quoted.
SPECIAL_CHARS = frozenset(";='\"")


def needs_quoting(value: str) -> bool:
    """
    Tells whether a value would not survive a parse when written bare.

    Empty values, values with edge whitespace (a parse trims it) and
    values holding a delimiter or quote character must be quoted.
    """
    if not value or value != value.strip():
        return True
    return any(c in SPECIAL_CHARS for c in value)


def quote_value(value: str, force_quote: bool = False) -> str:
    """
    Writes a value, quoting it when required.

    Double quotes are preferred. Single quotes are used when the value
    holds a double quote but no single quote; with both present the double
    quotes inside are doubled.

    Args:
        value (str): Decoded value.
        force_quote (bool): Quote even if the value could be written bare.

    Returns:
        str: The value as it should appear after ``=``.
    """
    if not force_quote and not needs_quoting(value):
        return value
    if '"' in value and "'" not in value:
        return f"'{value}'"
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def quote_odbc_value(key: str, value: str, force_quote: bool = False) -> str:
    """
    Writes a value using ODBC brace quoting.

    Values are wrapped in braces (with ``}`` doubled) when forced, when they
    start with ``{``, contain ``;`` or edge whitespace, or belong to the
    ``driver`` key.
    """
    should_quote = force_quote or (
        bool(value)
        and (
            value.startswith("{")
            or ";" in value
            or value != value.strip()
            or key.strip().lower() == "driver"
        )
    )
    if not should_quote:
        return value
    escaped = value.replace("}", "}}")
    return "{" + escaped + "}"


def check_key(key: str, odbc: bool = False) -> None:
    """
    Rejects keys that a parse could not read back.

    Keys are never quoted: a ``;`` splits the pair, an empty key is dropped
    by the parser, and under ODBC rules ``=`` ends the key.

    Raises:
        ValueError: If the key cannot be encoded.
    """
    if not key.strip():
        raise ValueError("connection string key must not be empty")
    if ";" in key:
        raise ValueError(f"connection string key {key!r} must not contain ';'")
    if odbc and "=" in key:
        raise ValueError(f"ODBC connection string key {key!r} must not contain '='")


def _encode_pair(key: str, value: str, force_quote: bool, odbc: bool) -> str:
    check_key(key, odbc)
    if odbc:
        return f"{key}={quote_odbc_value(key, value, force_quote)}"
    escaped_key = key.replace("=", "==")
    return f"{escaped_key}={quote_value(value, force_quote)}"


def encode_key_value(
    key: str, value: str, force_quote: bool = False, odbc: bool = False
) -> str:
    """
    Encodes one pair as a terminated fragment.

    Args:
        key (str): Key written as supplied (``=`` is doubled outside ODBC rules).
        value (str): Decoded value.
        force_quote (bool): Always quote the value.
        odbc (bool): Use ODBC brace quoting.

    Returns:
        str: ``key=value;``

    Raises:
        ValueError: If the key is empty or holds a character keys cannot carry.
    """
    return _encode_pair(key, value, force_quote, odbc) + ";"


def append_key_value(
    buffer: str, key: str, value: str, force_quote: bool = False, odbc: bool = False
) -> str:
    """
    Appends one pair to a connection string being built.

    A ``;`` separator is inserted when ``buffer`` is not empty and does not
    already end with one, so the result carries no trailing terminator.

    Example:
        >>> s = append_key_value("", "database", "MasterDb")
        >>> append_key_value(s, "password", "pass=1")
        'database=MasterDb;password="pass=1"'

    Returns:
        str: The extended connection string.
    """
    if buffer and not buffer.endswith(";"):
        buffer += ";"
    return buffer + _encode_pair(key, value, force_quote, odbc)
