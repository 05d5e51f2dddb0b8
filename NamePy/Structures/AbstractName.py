from abc import abstractmethod
from typing import Optional
from typing_extensions import override

from NamePy.Structures import NameManipulation
from NamePy.Structures.Masking import DEFAULT_DELIMITER
from NamePy.Structures.Name import Name
from NamePy.Structures.NameContracts import *

class AbstractName(Name):
    """
    Implements the Name contract on top of a small set of storage primitives: get_no_components, do_get_component, do_set_component, do_insert, do_remove and clone.
    Preconditions are checked before a primitive is called, postconditions and class invariants after it returns, so every representation gets the same checks.
    """
    def __init__(self, delimiter : str = DEFAULT_DELIMITER):
        assert_is_valid_delimiter(delimiter)
        self.delimiter = delimiter

    # storage primitives

    @abstractmethod
    def do_get_component(self, i : int) -> str:
        raise NotImplementedError(f"Method do_get_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def do_set_component(self, i : int, c : str) -> Name:
        raise NotImplementedError(f"Method do_set_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def do_insert(self, i : int, c : str) -> Name:
        raise NotImplementedError(f"Method do_insert not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def do_remove(self, i : int) -> Name:
        raise NotImplementedError(f"Method do_remove not implemented for class {self.__class__.__name__}")

    # read access

    @override
    def is_empty(self) -> bool:
        return self.get_no_components() == 0

    @override
    def get_delimiter_character(self) -> str:
        return self.delimiter

    @override
    def get_component(self, i : int) -> str:
        assert_is_valid_index(i, self.get_no_components())
        return self.do_get_component(i)

    # editing, every method returns a new Name

    @override
    @ensures_class_invariants
    def set_component(self, i : int, c : str) -> Name:
        no_components = self.get_no_components()
        assert_is_valid_index(i, no_components)
        assert_is_valid_component(c, self.delimiter)

        result = self.do_set_component(i, c)

        assert_component_count(result, no_components, "set_component")
        assert_component_at(result, i, c, "set_component")
        return result

    @override
    @ensures_class_invariants
    def insert(self, i : int, c : str) -> Name:
        no_components = self.get_no_components()
        assert_is_valid_insert_index(i, no_components)
        assert_is_valid_component(c, self.delimiter)

        result = self.do_insert(i, c)

        assert_component_count(result, no_components + 1, "insert")
        assert_component_at(result, i, c, "insert")
        return result

    @override
    @ensures_class_invariants
    def append(self, c : str) -> Name:
        no_components = self.get_no_components()
        assert_is_valid_component(c, self.delimiter)

        result = self.do_insert(no_components, c)

        assert_component_count(result, no_components + 1, "append")
        assert_component_at(result, no_components, c, "append")
        return result

    @override
    @ensures_class_invariants
    def remove(self, i : int) -> Name:
        no_components = self.get_no_components()
        assert_is_valid_index(i, no_components)

        result = self.do_remove(i)

        assert_component_count(result, no_components - 1, "remove")
        return result

    @override
    @ensures_class_invariants
    def concat(self, other : Name) -> Name:
        assert_is_name(other)
        expected = self.get_no_components() + other.get_no_components()

        result = NameManipulation.concat(self, other)

        assert_component_count(result, expected, "concat")
        return result

    # conversion

    @override
    def as_string(self, delimiter : Optional[str] = None) -> str:
        if delimiter is None:
            delimiter = self.delimiter
        assert_is_valid_delimiter(delimiter)
        return NameManipulation.as_string(self, delimiter)

    @override
    def as_data_string(self) -> str:
        return NameManipulation.as_data_string(self)

    # equality

    @override
    def is_equal(self, other : Name) -> bool:
        assert_is_name(other)
        return NameManipulation.structurally_equal(self, other)

    @override
    def get_hash_code(self) -> int:
        return NameManipulation.name_hash_code(self)

__all__ = ['AbstractName']
