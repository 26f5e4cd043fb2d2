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
connstr - .NET connection strings for Python

Parses and re-encodes the semicolon-delimited ``key=value`` connection
strings used by Entity Framework and the MS SQL client, with typed,
alias-aware accessors over the parsed attributes.
"""

__version__ = "0.1.0"
__author__ = "Michael Maillet, Damien Davison, Sacha Davison"
__license__ = "Apache-2.0"

from .ENCODERS.key_value_encoder import append_key_value, encode_key_value
from .MODELS.canonical_key import CanonicalKey, OtherKey
from .MODELS.parser_options import ParserOptions
from .PARSERS.key_normalizer import normalize
from .STORE.connection_string import ConnectionString, parse
from .VIEWS import ConnStrView, EntityFrameworkConnStr, MsSqlConnStr
from .exceptions import ConnStrError, ParseError

__all__ = [
    "CanonicalKey",
    "ConnStrError",
    "ConnStrView",
    "ConnectionString",
    "EntityFrameworkConnStr",
    "MsSqlConnStr",
    "OtherKey",
    "ParseError",
    "ParserOptions",
    "append_key_value",
    "encode_key_value",
    "normalize",
    "parse",
]
