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
Common plumbing for typed connection string views.
"""
from typing import FrozenSet, Optional, Type, TypeVar, Union

from ..MODELS.canonical_key import CanonicalKey
from ..MODELS.parser_options import ParserOptions
from ..STORE.connection_string import ConnectionString, KeyLike

V = TypeVar("V", bound="ConnStrView")

BOOL_TRUE_TOKENS: FrozenSet[str] = frozenset({"true", "yes"})


def parse_flag(value: Optional[str], truthy: FrozenSet[str] = BOOL_TRUE_TOKENS) -> bool:
    """
    Reads a boolean attribute. Absent or unrecognized text is False.
    """
    if value is None:
        return False
    return value.strip().lower() in truthy


class ConnStrView:
    """
    Typed accessors over a ConnectionString.

    A view holds no state of its own: it either owns a fresh store or
    borrows the one it is given, so edits through any view are visible to
    every other view of the same store.
    """
    def __init__(self, connection_string: Optional[ConnectionString] = None):
        if connection_string is None:
            connection_string = ConnectionString()
        self._conn = connection_string

    @classmethod
    def from_text(
        cls: Type[V],
        text: Union[str, bytes, bytearray],
        options: Optional[ParserOptions] = None,
    ) -> V:
        """
        Parses a connection string into this view.

        Raises:
            ParseError: If ``text`` is not text.
        """
        return cls(ConnectionString.parse(text, options))

    @property
    def connection_string(self) -> ConnectionString:
        return self._conn

    def view_as(self, view_cls: Type[V]) -> V:
        """Wraps the same store in another view."""
        return view_cls(self._conn)

    def get(self, key: KeyLike) -> Optional[str]:
        return self._conn.get(key)

    def set(self, key: KeyLike, value: Optional[str]) -> None:
        """Stores a value; None removes the key."""
        if value is None:
            self._conn.remove(key)
        else:
            self._conn.set(key, value)

    def remove(self, key: KeyLike) -> None:
        self._conn.remove(key)

    def to_text(self) -> str:
        return self._conn.to_text()

    def _get_flag(self, key: CanonicalKey, truthy: FrozenSet[str] = BOOL_TRUE_TOKENS) -> bool:
        return parse_flag(self._conn.get(key), truthy)

    def _set_flag(self, key: CanonicalKey, value: Optional[bool]) -> None:
        self.set(key, None if value is None else ("true" if value else "false"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnStrView):
            return NotImplemented
        return type(self) is type(other) and self._conn == other._conn

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._conn!r})"
