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
Tokenizer splitting a connection string into key/value fragments.

Fragments are separated by ``;``. A value may be quoted with ``"`` or ``'``
(or with braces under ODBC rules); inside a quoted value the quote
character is doubled to embed itself. Parsing is permissive: fragments
that cannot be understood are dropped or kept verbatim, never raised.
"""
import logging
from typing import Dict, Iterator, Optional, Tuple

from ..MODELS.parser_options import DEFAULT_OPTIONS, ParserOptions
from ..MODELS.raw_pair import RawPair

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")
ODBC_OPEN = "{"
ODBC_CLOSE = "}"


class Tokenizer:
    """
    Single forward pass over a connection string yielding RawPair objects.
    """
    def __init__(self, text: str, options: Optional[ParserOptions] = None):
        self.text = text
        self.options = options or DEFAULT_OPTIONS
        # Closing character -> earliest position a scan for it failed from.
        self._unclosed: Dict[str, int] = {}

    def __iter__(self) -> Iterator[RawPair]:
        return self.tokens()

    def tokens(self) -> Iterator[RawPair]:
        """
        Lazily yields the fragments of the connection string in source order.

        Empty segments produce nothing, and so do fragments with an empty key.

        Returns:
            Iterator[RawPair]: Key and decoded value of each fragment.
        """
        text = self.text
        length = len(text)
        pos = 0
        self._unclosed = {}

        while pos < length:
            if text[pos] == ";" or text[pos].isspace():
                pos += 1
                continue

            start = pos
            key, pos, has_value = self._read_key(pos)
            key = key.strip()

            value = ""
            quoted = False
            if has_value:
                value, pos, quoted = self._read_value(pos)

            if not key:
                logger.debug("Skipping fragment with an empty key at offset %d", start)
                continue

            yield RawPair(
                key=key,
                value=value,
                offset=start,
                has_value=has_value,
                quoted=quoted,
            )

    def _read_key(self, pos: int) -> Tuple[str, int, bool]:
        """
        Reads a key up to the first unescaped ``=``.

        Outside ODBC rules ``==`` stands for a literal ``=`` in the key.
        Returns the key, the position after the delimiter and whether the
        key is followed by a value.
        """
        text = self.text
        length = len(text)
        buf = []

        while pos < length:
            c = text[pos]
            if c == "=":
                if not self.options.odbc and pos + 1 < length and text[pos + 1] == "=":
                    buf.append("=")
                    pos += 2
                    continue
                return "".join(buf), pos + 1, True
            if c == ";":
                return "".join(buf), pos + 1, False
            buf.append(c)
            pos += 1

        return "".join(buf), pos, False

    def _read_value(self, pos: int) -> Tuple[str, int, bool]:
        text = self.text
        length = len(text)
        start = pos

        while pos < length and text[pos].isspace():
            pos += 1

        if pos < length:
            first = text[pos]
            closing = None
            if self.options.odbc:
                if first == ODBC_OPEN:
                    closing = ODBC_CLOSE
            elif first in QUOTE_CHARS:
                closing = first

            if closing is not None:
                found = self._read_quoted(pos + 1, closing)
                if found is not None:
                    value, end = found
                    return value, end, True
                logger.debug(
                    "Unterminated quoted value at offset %d, keeping it verbatim", pos
                )

        end = text.find(";", start)
        if end == -1:
            end = length
        return text[start:end].strip(), end + 1, False

    def _read_quoted(self, pos: int, closing: str) -> Optional[Tuple[str, int]]:
        """
        Scans a quoted value starting right after the opening quote.

        The closing character ends the value only when followed by optional
        whitespace and then ``;`` or the end of input; elsewhere a lone
        closing character is literal. A doubled closing character embeds
        one. Returns None when no closing character is found.
        """
        text = self.text
        length = len(text)
        start = pos

        failed_from = self._unclosed.get(closing)
        if failed_from is not None and failed_from <= pos:
            # Past the leading run of closing characters everything pairs up
            # as in the earlier failed scan, so only that run can close here.
            run = pos
            while run < length and text[run] == closing:
                run += 1
            if (run - pos) % 2 == 1:
                end = self._boundary_after(run)
                if end is not None:
                    return closing * ((run - pos) // 2), end
            return None

        buf = []

        while pos < length:
            c = text[pos]
            if c == closing:
                if pos + 1 < length and text[pos + 1] == closing:
                    buf.append(c)
                    pos += 2
                    continue
                end = self._boundary_after(pos + 1)
                if end is not None:
                    return "".join(buf), end
            buf.append(c)
            pos += 1

        self._unclosed[closing] = start
        return None

    def _boundary_after(self, pos: int) -> Optional[int]:
        text = self.text
        length = len(text)
        while pos < length and text[pos].isspace():
            pos += 1
        if pos == length:
            return pos
        if text[pos] == ";":
            return pos + 1
        return None


def tokenize(text: str, options: Optional[ParserOptions] = None) -> Iterator[RawPair]:
    """Shortcut for ``Tokenizer(text, options).tokens()``."""
    return Tokenizer(text, options).tokens()
