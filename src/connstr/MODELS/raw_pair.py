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
Model for a single key/value fragment as found by the tokenizer.
"""
from pydantic import BaseModel


class RawPair(BaseModel):
    """
    A key/value fragment before key normalization.

    The value is already unquoted and unescaped; ``quoted`` records whether
    it was delimited in the source.
    """
    key: str
    value: str = ""
    offset: int = 0
    has_value: bool = True
    quoted: bool = False
