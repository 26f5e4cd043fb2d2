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
Entity Framework connection string view.
"""
from typing import Optional

from ..MODELS.canonical_key import CanonicalKey
from ..STORE.connection_string import ConnectionString
from .base import ConnStrView
from .mssql import MsSqlConnStr


class EntityFrameworkConnStr(ConnStrView):
    """
    Accessors for an Entity Framework connection string.

    The provider connection string is itself a connection string, stored
    quoted inside the outer one.
    """

    def metadata(self) -> Optional[str]:
        return self.get(CanonicalKey.METADATA)

    def set_metadata(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.METADATA, value)

    def name(self) -> Optional[str]:
        return self.get(CanonicalKey.NAME)

    def set_name(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.NAME, value)

    def provider(self) -> Optional[str]:
        return self.get(CanonicalKey.PROVIDER)

    def set_provider(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.PROVIDER, value)

    def provider_connection_string(self) -> Optional[str]:
        return self.get(CanonicalKey.PROVIDER_CONNECTION_STRING)

    def set_provider_connection_string(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.PROVIDER_CONNECTION_STRING, value)

    def provider_connection(self) -> Optional[MsSqlConnStr]:
        """
        Parses the provider connection string.

        The result is a copy: edits must be stored back with
        set_provider_connection.
        """
        inner = self.provider_connection_string()
        if inner is None:
            return None
        return MsSqlConnStr(ConnectionString.parse(inner, self._conn.options))

    def set_provider_connection(self, view: Optional[MsSqlConnStr]) -> None:
        self.set_provider_connection_string(None if view is None else view.to_text())
