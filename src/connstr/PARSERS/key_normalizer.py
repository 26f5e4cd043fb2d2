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
Maps raw key text to canonical attribute identities.
"""
from typing import Union

from ..MODELS.canonical_key import ALIAS_TABLE, CanonicalKey, Key, OtherKey


def normalize(raw_key: str) -> Key:
    """
    Resolves a key as written in a connection string.

    Args:
        raw_key (str): Key text; surrounding whitespace and case are ignored.

    Returns:
        Key: The matching CanonicalKey, or an OtherKey holding the
        trimmed, lower-cased text.
    """
    folded = raw_key.strip().lower()
    canonical = ALIAS_TABLE.get(folded)
    if canonical is not None:
        return canonical
    return OtherKey(folded)


def coerce_key(key: Union[Key, str]) -> Key:
    """
    Accepts a resolved key or alias text.

    An OtherKey built by hand is looked up again, so ``OtherKey("server")``
    resolves to the data source key.
    """
    if isinstance(key, CanonicalKey):
        return key
    if isinstance(key, OtherKey):
        return normalize(key.name)
    return normalize(key)
