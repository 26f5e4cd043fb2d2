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
MS SQL (System.Data.SqlClient) connection string view.

Example:
    >>> conn = MsSqlConnStr.from_text("server=db01;Database=Db1;pwd='Test=1'")
    >>> conn.data_source(), conn.initial_catalog(), conn.password()
    ('db01', 'Db1', 'Test=1')
"""
from typing import FrozenSet, Optional

from ..MODELS.canonical_key import CanonicalKey
from .base import ConnStrView

INTEGRATED_SECURITY_TOKENS: FrozenSet[str] = frozenset({"true", "yes", "sspi"})


class MsSqlConnStr(ConnStrView):
    """
    Accessors for the attributes understood by the MS SQL client.

    Text getters return None when the attribute is absent. Boolean getters
    are False when absent or unrecognized. Setters accept None to remove
    the attribute.
    """

    def application_name(self) -> Optional[str]:
        return self.get(CanonicalKey.APPLICATION_NAME)

    def set_application_name(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.APPLICATION_NAME, value)

    def data_source(self) -> Optional[str]:
        return self.get(CanonicalKey.DATA_SOURCE)

    def set_data_source(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.DATA_SOURCE, value)

    def initial_catalog(self) -> Optional[str]:
        return self.get(CanonicalKey.INITIAL_CATALOG)

    def set_initial_catalog(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.INITIAL_CATALOG, value)

    def user_id(self) -> Optional[str]:
        return self.get(CanonicalKey.USER_ID)

    def set_user_id(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.USER_ID, value)

    def password(self) -> Optional[str]:
        return self.get(CanonicalKey.PASSWORD)

    def set_password(self, value: Optional[str]) -> None:
        self.set(CanonicalKey.PASSWORD, value)

    def integrated_security(self) -> bool:
        """True for ``true``, ``yes`` or ``sspi`` in any case."""
        return self._get_flag(CanonicalKey.INTEGRATED_SECURITY, INTEGRATED_SECURITY_TOKENS)

    def set_integrated_security(self, value: Optional[bool]) -> None:
        self._set_flag(CanonicalKey.INTEGRATED_SECURITY, value)

    def multiple_active_result_sets(self) -> bool:
        return self._get_flag(CanonicalKey.MULTIPLE_ACTIVE_RESULT_SETS)

    def set_multiple_active_result_sets(self, value: Optional[bool]) -> None:
        self._set_flag(CanonicalKey.MULTIPLE_ACTIVE_RESULT_SETS, value)

    def trust_server_certificate(self) -> bool:
        return self._get_flag(CanonicalKey.TRUST_SERVER_CERTIFICATE)

    def set_trust_server_certificate(self, value: Optional[bool]) -> None:
        self._set_flag(CanonicalKey.TRUST_SERVER_CERTIFICATE, value)

    def encrypt(self) -> bool:
        return self._get_flag(CanonicalKey.ENCRYPT)

    def set_encrypt(self, value: Optional[bool]) -> None:
        self._set_flag(CanonicalKey.ENCRYPT, value)

    def persist_security_info(self) -> bool:
        return self._get_flag(CanonicalKey.PERSIST_SECURITY_INFO)

    def set_persist_security_info(self, value: Optional[bool]) -> None:
        self._set_flag(CanonicalKey.PERSIST_SECURITY_INFO, value)

    def connect_timeout(self) -> Optional[int]:
        """Timeout in seconds, or None when absent or not an integer."""
        value = self.get(CanonicalKey.CONNECT_TIMEOUT)
        if value is None:
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    def set_connect_timeout(self, value: Optional[int]) -> None:
        self.set(CanonicalKey.CONNECT_TIMEOUT, None if value is None else str(int(value)))
