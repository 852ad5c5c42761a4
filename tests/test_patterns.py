"""Tests for pattern families."""

import pytest
from stackframes import (
    DATABASE_DRIVER_FAMILY,
    FAMILIES,
    MANAGED_VM_FAMILY,
    NATIVE_FAMILY,
    SCRIPT_BRIDGE_FAMILY,
    FamilyName,
    UnknownFamilyError,
    family_by_name,
)
from stackframes.base import capture
from stackframes.patterns import BRIDGE_FRAME_SIMPLIFIED, GENERIC_FRAME


def groups(family, line):
    match = family.match(line)
    assert match is not None, line
    return capture(match, "file"), capture(match, "line"), capture(match, "function")


class TestNativeFamily:
    def test_interpreter_frame(self):
        line = "./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'"
        assert groups(NATIVE_FAMILY, line) == (
            "./spec/notice_spec.rb", "43", "block (3 levels) in <top (required)>"
        )

    def test_windows_path(self):
        line = "C:/Ruby/lib/app.rb:7:in `run'"
        assert groups(NATIVE_FAMILY, line) == ("C:/Ruby/lib/app.rb", "7", "run")

    def test_generic_file_and_line(self):
        assert groups(NATIVE_FAMILY, "/foo/bar/baz.ext:43") == ("/foo/bar/baz.ext", "43", None)

    def test_generic_from_prefix(self):
        assert groups(NATIVE_FAMILY, "from /foo/bar.rb:12:in main") == ("/foo/bar.rb", "12", "main")

    def test_generic_without_line(self):
        assert groups(NATIVE_FAMILY, "/foo/bar.rb:in `main'") == ("/foo/bar.rb", None, "main")

    def test_no_colon_does_not_match(self):
        assert NATIVE_FAMILY.match("just some words") is None

    def test_rules_are_whole_line(self):
        assert GENERIC_FRAME.fullmatch("a.rb:1") is not None
        assert NATIVE_FAMILY.match("") is None


class TestManagedVMFamily:
    def test_java_frame(self):
        line = "org.jruby.ast.NewlineNode.interpret(NewlineNode.java:105)"
        assert groups(MANAGED_VM_FAMILY, line) == (
            "NewlineNode.java", "105", "org.jruby.ast.NewlineNode.interpret"
        )

    def test_java_frame_without_line(self):
        line = "sun.reflect.NativeMethodAccessorImpl.invoke0(Native Method)"
        assert groups(MANAGED_VM_FAMILY, line) == (
            "Native Method", None, "sun.reflect.NativeMethodAccessorImpl.invoke0"
        )

    def test_interpreter_frame_is_not_a_java_frame(self):
        assert MANAGED_VM_FAMILY.match("./app.rb:1:in `x'") is None


class TestDatabaseDriverFamily:
    def test_oracle_frame(self):
        line = 'ORA-06512: at "STORE.LI_LICENSES_PACK", line 1945'
        assert groups(DATABASE_DRIVER_FAMILY, line) == (None, "1945", "STORE.LI_LICENSES_PACK")

    def test_oracle_frame_without_function(self):
        assert groups(DATABASE_DRIVER_FAMILY, "ORA-06512: at line 1") == (None, "1", None)

    def test_interpreter_frame(self):
        line = "/usr/lib/ruby/oci8.rb:101:in `exec'"
        assert groups(DATABASE_DRIVER_FAMILY, line) == ("/usr/lib/ruby/oci8.rb", "101", "exec")


class TestScriptBridgeFamily:
    def test_call_frame(self):
        line = "compile ((execjs):6692:19)"
        assert groups(SCRIPT_BRIDGE_FAMILY, line) == ("(execjs)", "6692", "compile")

    def test_bare_frame_has_empty_function(self):
        assert groups(SCRIPT_BRIDGE_FAMILY, "bootstrap_node.js:467:3") == (
            "bootstrap_node.js", "467", ""
        )

    def test_interpreter_frame(self):
        line = "/opt/app/coffee.rb:5:in `compile'"
        assert groups(SCRIPT_BRIDGE_FAMILY, line) == ("/opt/app/coffee.rb", "5", "compile")

    def test_simplified_shape(self):
        assert BRIDGE_FRAME_SIMPLIFIED.fullmatch("compile ((execjs):6692:19)")
        assert not BRIDGE_FRAME_SIMPLIFIED.fullmatch("bootstrap_node.js:467:3")


class TestFamilyLookup:
    def test_all_families_registered(self):
        assert set(FAMILIES) == set(FamilyName)

    @pytest.mark.parametrize("name,expected", [
        ("native", NATIVE_FAMILY),
        ("MANAGED_VM", MANAGED_VM_FAMILY),
        ("database-driver", DATABASE_DRIVER_FAMILY),
        (" script_bridge ", SCRIPT_BRIDGE_FAMILY),
    ])
    def test_family_by_name(self, name, expected):
        assert family_by_name(name) is expected

    def test_unknown_family(self):
        with pytest.raises(UnknownFamilyError):
            family_by_name("cobol")

    def test_unknown_family_is_key_error(self):
        with pytest.raises(KeyError):
            family_by_name("")
