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
Unit tests for the connection string store.
"""
import pytest
from pydantic import ValidationError

from connstr import CanonicalKey, ConnectionString, OtherKey, ParseError, ParserOptions, parse


class TestParse:
    """Tests for building a store from text."""

    def test_aliases_collapse_to_one_key(self):
        """Test that aliases of one attribute share a single entry."""
        cs = parse("server=A;initial catalog=Db;data source=B")
        assert cs.keys() == [CanonicalKey.DATA_SOURCE, CanonicalKey.INITIAL_CATALOG]
        assert cs.get(CanonicalKey.DATA_SOURCE) == "B"

    def test_last_wins_keeps_first_position(self):
        """Test that a repeated key keeps its first position and last value."""
        cs = parse("a=1;b=2;A=3")
        assert cs.items() == [(OtherKey("a"), "3"), (OtherKey("b"), "2")]

    def test_absent_vs_empty(self):
        """Test that absent and present-but-empty are distinct."""
        cs = parse("password=;flag")
        assert cs.get("password") == ""
        assert cs.get("flag") == ""
        assert cs.get("user id") is None
        assert "flag" in cs
        assert "user id" not in cs

    def test_lookup_by_alias_text(self):
        """Test that get accepts any alias text."""
        cs = parse("Data Source=srv")
        assert cs.get("SERVER") == "srv"
        assert cs.get(CanonicalKey.DATA_SOURCE) == "srv"

    def test_values_stored_decoded(self):
        """Test that quoting is removed from stored values."""
        cs = parse("pwd='it''s';x=\"a;b\"")
        assert cs.get(CanonicalKey.PASSWORD) == "it's"
        assert cs.get("x") == "a;b"

    def test_empty_input(self):
        assert len(parse("")) == 0
        assert parse("").to_text() == ""

    def test_bytes_input(self):
        """Test that UTF-8 bytes are accepted."""
        cs = parse("server=hôte".encode("utf-8"))
        assert cs.get("server") == "hôte"

    def test_invalid_bytes_raise(self):
        with pytest.raises(ParseError):
            parse(b"server=\xff\xfe")

    @pytest.mark.parametrize("bad", [None, 42, ["server=x"]])
    def test_non_text_raises(self, bad):
        with pytest.raises(ParseError) as exc_info:
            parse(bad)
        assert isinstance(exc_info.value, ValueError)


class TestMutation:
    """Tests for set and remove."""

    def test_set_overwrites_in_place(self):
        cs = parse("a=1;b=2")
        cs.set("a", "3")
        assert cs.to_text() == "a=3;b=2;"

    def test_set_appends_new_key(self):
        cs = ConnectionString()
        cs.set(CanonicalKey.USER_ID, "john")
        cs.set("pwd", "Pass1=3")
        assert cs.to_text() == 'user id=john;password="Pass1=3";'

    def test_set_rejects_non_text(self):
        with pytest.raises(TypeError):
            ConnectionString().set("a", 1)

    def test_set_rejects_unencodable_keys(self):
        cs = parse("a=1")
        for key in ("x;integrated security", "", "   ", "a b;c"):
            with pytest.raises(ValueError):
                cs.set(key, "true")
        assert cs.to_text() == "a=1;"

    def test_set_rejects_equals_in_odbc_key(self):
        cs = ConnectionString(options=ParserOptions(odbc=True))
        with pytest.raises(ValueError):
            cs.set("a=b", "c")
        assert len(cs) == 0

    def test_set_with_hand_built_other_key(self):
        cs = ConnectionString()
        cs.set(OtherKey(" Odd Key "), "1")
        cs.set(OtherKey("Server"), "db01")
        assert cs.to_text() == "odd key=1;data source=db01;"
        assert parse(cs.to_text()) == cs

    def test_remove(self):
        cs = parse("a=1;b=2")
        cs.remove("a")
        cs.remove("missing")
        assert cs.to_text() == "b=2;"

    def test_copy_is_independent(self):
        cs = parse("a=1")
        other = cs.copy()
        other.set("a", "2")
        assert cs.get("a") == "1"


class TestToText:
    """Tests for re-encoding."""

    def test_canonical_names_are_written(self):
        cs = parse("Server=.;Database=Db1;UID=me")
        assert cs.to_text() == "data source=.;initial catalog=Db1;user id=me;"

    def test_unknown_keys_survive(self):
        cs = parse("Packet Size=4096;server=x")
        assert cs.to_text() == "packet size=4096;data source=x;"

    def test_round_trip(self):
        cs = ConnectionString()
        cs.set(CanonicalKey.DATA_SOURCE, r".\SQL2017")
        cs.set(CanonicalKey.PASSWORD, "a\"b'c;d=e")
        cs.set(CanonicalKey.USER_ID, " padded ")
        cs.set(CanonicalKey.APPLICATION_NAME, "")
        cs.set(OtherKey("odd=key"), "v")
        assert parse(cs.to_text()) == cs

    def test_idempotent(self):
        text = parse("server = a ;pwd='x=1';Foo=bar").to_text()
        assert parse(text).to_text() == text

    def test_odbc_dialect_remembered(self):
        options = ParserOptions(odbc=True)
        cs = parse("Driver={ODBC Driver 17};Pwd={a;b}", options)
        assert cs.get("driver") == "ODBC Driver 17"
        assert cs.to_text() == "driver={ODBC Driver 17};password={a;b};"
        assert parse(cs.to_text(), options) == cs

    def test_repr_hides_password(self):
        cs = parse("user id=me;password=secret")
        assert "secret" not in repr(cs)
        assert "'me'" in repr(cs)

    def test_str_is_text(self):
        assert str(parse("a=1")) == "a=1;"


def test_options_are_validated():
    with pytest.raises(ValidationError):
        ParserOptions(odbc="not a flag")
