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
Ordered store of decoded connection string attributes.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..ENCODERS.key_value_encoder import check_key, encode_key_value
from ..MODELS.canonical_key import CanonicalKey, Key, OtherKey
from ..MODELS.parser_options import DEFAULT_OPTIONS, ParserOptions
from ..PARSERS.key_normalizer import coerce_key
from ..PARSERS.tokenizer import Tokenizer
from ..exceptions import ParseError

logger = logging.getLogger(__name__)

KeyLike = Union[Key, str]

# Keys whose values are never shown by repr().
SECRET_KEYS = frozenset({CanonicalKey.PASSWORD})


def as_text(text: Union[str, bytes, bytearray]) -> str:
    """
    Checks the input is text, decoding UTF-8 bytes.

    Raises:
        ParseError: If the input is neither str nor decodable bytes.
    """
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"input is not valid UTF-8 ({e.reason} at byte {e.start})") from e
    raise ParseError(f"expected text, got {type(text).__name__}")


class ConnectionString:
    """
    Ordered mapping from attribute key to decoded value.

    A later occurrence of a key overwrites the earlier value but keeps its
    position, so re-encoding follows the order keys were first seen.
    """
    def __init__(
        self,
        pairs: Optional[Iterable[Tuple[KeyLike, str]]] = None,
        options: Optional[ParserOptions] = None,
    ):
        self.options = options or DEFAULT_OPTIONS
        self._values: Dict[Key, str] = {}
        for key, value in pairs or ():
            self.set(key, value)

    @classmethod
    def parse(
        cls,
        text: Union[str, bytes, bytearray],
        options: Optional[ParserOptions] = None,
    ) -> "ConnectionString":
        """
        Parses a connection string.

        Fragments that cannot be understood are skipped; only input that is
        not text at all is rejected.

        Args:
            text: The connection string.
            options (ParserOptions): Dialect; default rules when omitted.

        Returns:
            ConnectionString: Keys in first-seen order, last value wins.

        Raises:
            ParseError: If ``text`` is not a string or valid UTF-8 bytes.
        """
        text = as_text(text)
        result = cls(options=options)
        for pair in Tokenizer(text, result.options):
            key = coerce_key(pair.key)
            if key in result._values:
                logger.debug("Key '%s' repeated at offset %d, keeping the last value", key, pair.offset)
            result._values[key] = pair.value
        logger.debug("Parsed %d connection string keys", len(result._values))
        return result

    def get(self, key: KeyLike) -> Optional[str]:
        """Returns the decoded value, or None when the key is absent."""
        return self._values.get(coerce_key(key))

    def set(self, key: KeyLike, value: str) -> None:
        """
        Inserts or overwrites a value; an existing key keeps its position.

        Raises:
            TypeError: If ``value`` is not a string.
            ValueError: If the key could not be read back from ``to_text``.
        """
        if not isinstance(value, str):
            raise TypeError(f"value for '{key}' must be str, got {type(value).__name__}")
        resolved = coerce_key(key)
        check_key(resolved.display_name, self.options.odbc)
        self._values[resolved] = value

    def remove(self, key: KeyLike) -> None:
        """Deletes a key; absent keys are ignored."""
        self._values.pop(coerce_key(key), None)

    def items(self) -> List[Tuple[Key, str]]:
        return list(self._values.items())

    def keys(self) -> List[Key]:
        return list(self._values)

    def copy(self) -> "ConnectionString":
        return ConnectionString(self._values.items(), options=self.options)

    def to_text(self) -> str:
        """
        Re-encodes every key in store order, each terminated by ``;``.
        """
        return "".join(
            encode_key_value(key.display_name, value, odbc=self.options.odbc)
            for key, value in self._values.items()
        )

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, OtherKey)):
            return False
        return coerce_key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectionString):
            return NotImplemented
        return self.items() == other.items()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{key.display_name}={'***' if key in SECRET_KEYS else repr(value)}"
            for key, value in self._values.items()
        )
        return f"ConnectionString({shown})"


def parse(
    text: Union[str, bytes, bytearray], options: Optional[ParserOptions] = None
) -> ConnectionString:
    """Parses ``text`` into a ConnectionString. See ConnectionString.parse."""
    return ConnectionString.parse(text, options)
