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
Exceptions raised by the connection string library.

Fragment-level problems (empty keys, unterminated quotes) are never raised;
the parser skips or recovers them and logs at debug level.
"""


class ConnStrError(Exception):
    """Base class for all connection string errors."""


class ParseError(ConnStrError, ValueError):
    """
    Raised when the input handed to a constructor is not text at all.

    Attributes:
        reason: Human readable description of the failure.
    """

    def __init__(self, reason: str):
        super().__init__(f"cannot parse connection string: {reason}")
        self.reason = reason
