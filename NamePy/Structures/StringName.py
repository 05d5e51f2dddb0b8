from typing import List, Sequence
from typing_extensions import override

from NamePy.Structures.AbstractName import AbstractName
from NamePy.Structures.Masking import DEFAULT_DELIMITER, join_masked, split_masked
from NamePy.Structures.Name import Name
from NamePy.Structures.NameContracts import *
from NamePy.Structures.NameErrors import InvalidArgumentError

class StringName(AbstractName):
    """
    A name stored as a single string of masked components joined by the delimiter.
    Components are parsed from the string whenever they are read or edited, and the string is rebuilt after every edit.

    The empty string is the name without components. Use from_components to build a name consisting of a single empty component.
    """
    def __init__(self, source : str, delimiter : str = DEFAULT_DELIMITER):
        assert_is_not_none(source, "source")
        if not isinstance(source, str):
            raise InvalidArgumentError(f"source must be a string, got {source.__class__.__name__}")
        AbstractName.__init__(self, delimiter)

        self.name = source
        self.no_components = 0 if source == "" else len(split_masked(source, delimiter))
        for c in self.parse_components():
            assert_is_valid_component(c, delimiter)

        assert_class_invariants(self)

    @classmethod
    def from_components(cls, components : Sequence[str], delimiter : str = DEFAULT_DELIMITER) -> 'StringName':
        assert_is_not_none(components, "components")
        if isinstance(components, str):
            raise InvalidArgumentError("components must be a sequence of components, not a string")
        assert_is_valid_delimiter(delimiter)
        for c in components:
            assert_is_valid_component(c, delimiter)

        result = cls(join_masked(components, delimiter), delimiter)
        # [""] and [] both join to "", the count tells them apart
        result.no_components = len(components)

        assert_class_invariants(result)
        return result

    def parse_components(self) -> List[str]:
        if self.no_components == 0:
            return []
        return split_masked(self.name, self.delimiter)

    @override
    def clone(self) -> Name:
        return StringName.from_components(self.parse_components(), self.delimiter)

    @override
    def get_no_components(self) -> int:
        return self.no_components

    @override
    def do_get_component(self, i : int) -> str:
        return self.parse_components()[i]

    @override
    def do_set_component(self, i : int, c : str) -> Name:
        components = self.parse_components()
        components[i] = c
        return StringName.from_components(components, self.delimiter)

    @override
    def do_insert(self, i : int, c : str) -> Name:
        components = self.parse_components()
        components.insert(i, c)
        return StringName.from_components(components, self.delimiter)

    @override
    def do_remove(self, i : int) -> Name:
        components = self.parse_components()
        del components[i]
        return StringName.from_components(components, self.delimiter)

__all__ = ['StringName']
