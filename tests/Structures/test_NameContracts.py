from typing import Any
import pytest

from NamePy.Structures import NameContracts
from NamePy.Structures.Name import Name
from NamePy.Structures.NameContracts import assert_class_invariants
from NamePy.Structures.NameErrors import *
from NamePy.Structures.StringArrayName import StringArrayName
from NamePy.Structures.StringName import StringName

class LosingStringArrayName(StringArrayName):
    """ Forgets the component on insert. """
    def do_insert(self, i : int, c : str) -> Name:
        return StringArrayName(self.components, self.delimiter)

    def do_set_component(self, i : int, c : str) -> Name:
        return StringArrayName(self.components, self.delimiter)

class NegativeStringArrayName(StringArrayName):
    def get_no_components(self) -> int:
        return -1

class WideDelimiterStringArrayName(StringArrayName):
    def get_delimiter_character(self) -> str:
        return "ab"

class EscapeDelimiterStringArrayName(StringArrayName):
    def get_delimiter_character(self) -> str:
        return "\\"

# preconditions

@pytest.mark.parametrize("delimiter", [None, "", "ab", 1, "\\"])
def test_invalid_delimiter(delimiter : Any):
    with pytest.raises(InvalidArgumentError):
        StringArrayName(["test"], delimiter)
    with pytest.raises(InvalidArgumentError):
        StringName("test", delimiter)

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_escape_character_is_not_a_delimiter(cls : Any):
    with pytest.raises(InvalidArgumentError):
        cls(["x", "y"], "\\")
    with pytest.raises(InvalidArgumentError):
        cls(["x", "y"]).as_string("\\")

def test_invalid_source():
    with pytest.raises(InvalidArgumentError):
        StringArrayName(None) # type: ignore
    with pytest.raises(InvalidArgumentError):
        StringName(None) # type: ignore
    with pytest.raises(InvalidArgumentError):
        StringArrayName("oss.cs") # type: ignore
    with pytest.raises(InvalidArgumentError):
        StringName(["oss", "cs"]) # type: ignore

def test_malformed_components_are_rejected():
    with pytest.raises(InvalidArgumentError):
        StringArrayName(["a.b"])
    with pytest.raises(InvalidArgumentError):
        StringArrayName(["a\\b"])
    with pytest.raises(InvalidArgumentError):
        StringName("a\\b.c")
    with pytest.raises(InvalidArgumentError):
        StringName.from_components(["a/b", "c.d"], ".")

def test_trailing_escape_character_is_rejected():
    with pytest.raises(InvalidArgumentError):
        StringName("oss.cs\\")
    with pytest.raises(InvalidArgumentError):
        StringArrayName(["cs\\"])

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_get_component_out_of_bounds(cls : Any):
    n = cls(["oss", "cs", "fau", "de"])
    with pytest.raises(InvalidArgumentError):
        n.get_component(-1)
    with pytest.raises(InvalidArgumentError):
        n.get_component(4)
    with pytest.raises(InvalidArgumentError):
        n.get_component("1")
    with pytest.raises(InvalidArgumentError):
        n.get_component(True)

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_set_component_preconditions(cls : Any):
    n = cls(["oss", "cs", "fau", "de"])
    with pytest.raises(InvalidArgumentError):
        n.set_component(-1, "test")
    with pytest.raises(InvalidArgumentError):
        n.set_component(4, "test")
    with pytest.raises(InvalidArgumentError):
        n.set_component(0, None)
    with pytest.raises(InvalidArgumentError):
        n.set_component(0, "a.b")

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_insert_preconditions(cls : Any):
    n = cls(["oss", "cs", "fau", "de"])
    with pytest.raises(InvalidArgumentError):
        n.insert(-1, "test")
    with pytest.raises(InvalidArgumentError):
        n.insert(5, "test")
    with pytest.raises(InvalidArgumentError):
        n.insert(0, None)

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_append_remove_concat_preconditions(cls : Any):
    n = cls(["oss", "cs"])
    with pytest.raises(InvalidArgumentError):
        n.append(None)
    with pytest.raises(InvalidArgumentError):
        n.append("x\\")
    with pytest.raises(InvalidArgumentError):
        n.remove(-1)
    with pytest.raises(InvalidArgumentError):
        n.remove(2)
    with pytest.raises(InvalidArgumentError):
        n.concat(None)
    with pytest.raises(InvalidArgumentError):
        n.concat("fau.de")

@pytest.mark.parametrize("cls", [StringArrayName, StringName.from_components])
def test_equality_and_conversion_preconditions(cls : Any):
    n = cls(["oss", "cs"])
    with pytest.raises(InvalidArgumentError):
        n.is_equal(None)
    with pytest.raises(InvalidArgumentError):
        n.as_string("")
    with pytest.raises(InvalidArgumentError):
        n.as_string("//")

def test_remove_from_empty_name():
    with pytest.raises(InvalidArgumentError):
        StringName("").remove(0)

# postconditions

def test_append_postcondition():
    n = LosingStringArrayName(["oss", "cs"])
    with pytest.raises(MethodFailedError):
        n.append("de")
    with pytest.raises(MethodFailedError):
        n.insert(0, "de")

def test_set_component_postcondition():
    n = LosingStringArrayName(["oss", "cs"])
    with pytest.raises(MethodFailedError):
        n.set_component(0, "fau")

def test_postconditions_can_be_switched_off(monkeypatch : pytest.MonkeyPatch):
    monkeypatch.setattr(NameContracts, "should_check_postconditions", False)
    n = LosingStringArrayName(["oss", "cs"])
    assert n.append("de").get_no_components() == 2

# class invariants

def test_invariant_malformed_component():
    n = StringArrayName(["oss", "cs"])
    n.components = ("oss", "c.s")
    with pytest.raises(InvalidStateError):
        assert_class_invariants(n)
    with pytest.raises(InvalidStateError):
        n.remove(1)

def test_invariant_negative_count():
    with pytest.raises(InvalidStateError):
        NegativeStringArrayName(["oss"])

def test_invariant_delimiter():
    with pytest.raises(InvalidStateError):
        WideDelimiterStringArrayName(["oss"])
    with pytest.raises(InvalidStateError):
        EscapeDelimiterStringArrayName(["oss"])

def test_invariants_hold_after_edits():
    n = StringArrayName(["oss", "cs", "fau", "de"])
    n = n.append("fau").remove(0)
    assert n.get_no_components() >= 0
    assert len(n.get_delimiter_character()) == 1

def test_error_hierarchy():
    for error in [InvalidArgumentError, MethodFailedError, InvalidStateError]:
        assert issubclass(error, NameContractError)
    assert InvalidArgumentError("bad index").message == "bad index"
