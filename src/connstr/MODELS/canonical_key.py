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
Canonical identities of connection string attributes and their aliases.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union


class CanonicalKey(str, Enum):
    """
    Recognized connection string attributes.

    The value of each member is the text used when the key is written back.
    """
    # MS SQL (System.Data.SqlClient)
    APPLICATION_NAME = "application name"
    CONNECT_TIMEOUT = "connect timeout"
    DATA_SOURCE = "data source"
    ENCRYPT = "encrypt"
    INITIAL_CATALOG = "initial catalog"
    INTEGRATED_SECURITY = "integrated security"
    MULTIPLE_ACTIVE_RESULT_SETS = "multipleactiveresultsets"
    PASSWORD = "password"
    PERSIST_SECURITY_INFO = "persist security info"
    TRUST_SERVER_CERTIFICATE = "trustservercertificate"
    USER_ID = "user id"

    # Entity Framework
    METADATA = "metadata"
    NAME = "name"
    PROVIDER = "provider"
    PROVIDER_CONNECTION_STRING = "provider connection string"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OtherKey:
    """
    An attribute missing from the alias table.

    ``name`` is the trimmed, lower-cased key text so unrecognized
    attributes survive a round trip.
    """

    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", self.name.strip().lower())

    @property
    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


Key = Union[CanonicalKey, OtherKey]


_SYNONYMS: Dict[CanonicalKey, Tuple[str, ...]] = {
    CanonicalKey.APPLICATION_NAME: ("app",),
    CanonicalKey.CONNECT_TIMEOUT: ("connection timeout", "timeout"),
    CanonicalKey.DATA_SOURCE: ("server", "address", "addr", "network address"),
    CanonicalKey.INITIAL_CATALOG: ("database",),
    CanonicalKey.INTEGRATED_SECURITY: ("trusted_connection",),
    CanonicalKey.MULTIPLE_ACTIVE_RESULT_SETS: ("multiple active result sets",),
    CanonicalKey.PASSWORD: ("pwd",),
    CanonicalKey.PERSIST_SECURITY_INFO: ("persistsecurityinfo",),
    CanonicalKey.TRUST_SERVER_CERTIFICATE: ("trust server certificate",),
    CanonicalKey.USER_ID: ("uid", "user"),
}


def _build_alias_table() -> Mapping[str, CanonicalKey]:
    table: Dict[str, CanonicalKey] = {}
    for key in CanonicalKey:
        for alias in (key.value,) + _SYNONYMS.get(key, ()):
            if alias in table:
                raise RuntimeError(
                    f"Alias {alias!r} maps to both {table[alias].name} and {key.name}"
                )
            table[alias] = key
    return MappingProxyType(table)


# Lower-cased alias text -> canonical key. Built once, read-only.
ALIAS_TABLE: Mapping[str, CanonicalKey] = _build_alias_table()
