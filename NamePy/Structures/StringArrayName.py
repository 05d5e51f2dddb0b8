from typing import List, Sequence, Tuple
from typing_extensions import override

from NamePy.Structures.AbstractName import AbstractName
from NamePy.Structures.Masking import DEFAULT_DELIMITER
from NamePy.Structures.Name import Name
from NamePy.Structures.NameContracts import *
from NamePy.Structures.NameErrors import InvalidArgumentError

class StringArrayName(AbstractName):
    """
    A name stored as a sequence of masked components.
    """
    def __init__(self, source : Sequence[str], delimiter : str = DEFAULT_DELIMITER):
        assert_is_not_none(source, "source")
        if isinstance(source, str):
            raise InvalidArgumentError("source must be a sequence of components, not a string")
        AbstractName.__init__(self, delimiter)

        for c in source:
            assert_is_valid_component(c, delimiter)
        self.components : Tuple[str, ...] = tuple(source)

        assert_class_invariants(self)

    @override
    def clone(self) -> Name:
        return StringArrayName(self.components, self.delimiter)

    @override
    def get_no_components(self) -> int:
        return len(self.components)

    @override
    def do_get_component(self, i : int) -> str:
        return self.components[i]

    @override
    def do_set_component(self, i : int, c : str) -> Name:
        new_components : List[str] = list(self.components)
        new_components[i] = c
        return StringArrayName(new_components, self.delimiter)

    @override
    def do_insert(self, i : int, c : str) -> Name:
        new_components : List[str] = list(self.components)
        new_components.insert(i, c)
        return StringArrayName(new_components, self.delimiter)

    @override
    def do_remove(self, i : int) -> Name:
        new_components : List[str] = list(self.components)
        del new_components[i]
        return StringArrayName(new_components, self.delimiter)

__all__ = ['StringArrayName']
