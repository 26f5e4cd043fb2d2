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
Options controlling how connection strings are tokenized and encoded.
"""
from pydantic import BaseModel, ConfigDict


class ParserOptions(BaseModel):
    """
    Dialect selection for parsing and encoding.

    Attributes:
        odbc: Use ODBC rules: values are quoted with braces (``{...}``,
            ``}}`` embeds ``}``) and quote characters are ordinary text.
    """
    model_config = ConfigDict(frozen=True)

    odbc: bool = False


DEFAULT_OPTIONS = ParserOptions()
