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
Unit tests for the key/value encoder.
"""
import pytest
from connstr.ENCODERS.key_value_encoder import (
    append_key_value,
    encode_key_value,
    needs_quoting,
)


class TestEncodeKeyValue:
    """Tests for single fragments."""

    def test_value_with_equals_is_quoted(self):
        assert encode_key_value("password", "Pass1=3") == 'password="Pass1=3";'

    def test_plain_value_is_bare(self):
        assert encode_key_value("user id", "john") == "user id=john;"

    def test_backslash_needs_no_quoting(self):
        assert encode_key_value("data source", r".\SQL2017") == r"data source=.\SQL2017;"

    def test_double_quote_only_uses_single_quotes(self):
        assert encode_key_value("pwd", 'a"b') == "pwd='a\"b';"

    def test_single_quote_uses_double_quotes(self):
        assert encode_key_value("pwd", "it's") == 'pwd="it\'s";'

    def test_both_quotes_double_the_double_quote(self):
        assert encode_key_value("pwd", 'a"b\'c') == 'pwd="a""b\'c";'

    def test_empty_value_is_quoted(self):
        assert encode_key_value("x", "") == 'x="";'

    def test_force_quote(self):
        assert encode_key_value("x", "y", force_quote=True) == 'x="y";'

    def test_edge_whitespace_is_quoted(self):
        assert encode_key_value("x", " y") == 'x=" y";'
        assert encode_key_value("x", "a b") == "x=a b;"

    def test_equals_in_key_is_doubled(self):
        assert encode_key_value("a=b", "c") == "a==b=c;"

    def test_unencodable_keys_rejected(self):
        for key in ("", "   ", "x;integrated security", "a b;c"):
            with pytest.raises(ValueError):
                encode_key_value(key, "v")
            with pytest.raises(ValueError):
                append_key_value("a=1", key, "v")

    def test_needs_quoting(self):
        assert not needs_quoting("plain")
        for value in ("", "a;b", "a=b", "a'b", 'a"b', " a", "a\t"):
            assert needs_quoting(value)


class TestOdbcEncoding:
    """Tests for brace quoting."""

    def test_plain(self):
        assert encode_key_value("pwd", "a=b", odbc=True) == "pwd=a=b;"

    def test_semicolon_braced(self):
        assert encode_key_value("pwd", "a}b;c", odbc=True) == "pwd={a}}b;c};"

    def test_leading_brace(self):
        assert encode_key_value("pwd", "{a", odbc=True) == "pwd={{a};"

    def test_driver_always_braced(self):
        assert encode_key_value("Driver", "SQL Server", odbc=True) == "Driver={SQL Server};"

    def test_empty_value_bare(self):
        assert encode_key_value("x", "", odbc=True) == "x=;"
        assert encode_key_value("x", "", force_quote=True, odbc=True) == "x={};"

    def test_key_written_verbatim(self):
        assert encode_key_value("Packet Size", "c", odbc=True) == "Packet Size=c;"

    def test_equals_in_key_rejected(self):
        with pytest.raises(ValueError):
            encode_key_value("a=b", "c", odbc=True)


class TestAppendKeyValue:
    """Tests for building a connection string pair by pair."""

    def test_documented_example(self):
        s = ""
        s = append_key_value(s, "data source", r".\SQL2017")
        s = append_key_value(s, "initial catalog", "Db1")
        s = append_key_value(s, "user id", "john")
        s = append_key_value(s, "password", "Pass1=3")
        assert s == r'data source=.\SQL2017;initial catalog=Db1;user id=john;password="Pass1=3"'

    def test_first_pair_has_no_separator(self):
        assert append_key_value("", "a", "test=2") == 'a="test=2"'

    def test_no_double_separator(self):
        assert append_key_value("a=1;", "b", "2") == "a=1;b=2"

    def test_buffer_is_not_mutated(self):
        buffer = "a=1"
        result = append_key_value(buffer, "b", "2")
        assert buffer == "a=1"
        assert result == "a=1;b=2"

    def test_more_pairs(self):
        s = append_key_value("", "database", "MasterDb")
        s = append_key_value(s, "server", r".\SQL2017")
        s = append_key_value(s, "user id", "me")
        s = append_key_value(s, "password", "pass=1")
        assert s == r'database=MasterDb;server=.\SQL2017;user id=me;password="pass=1"'
