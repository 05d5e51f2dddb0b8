from typing import List
from typeguard import typechecked

from NamePy.Structures.Masking import DEFAULT_DELIMITER, mask, remask, split_masked
from NamePy.Structures.Name import Name
from NamePy.Structures.NameContracts import assert_is_valid_component, assert_is_valid_delimiter
from NamePy.Structures.StringArrayName import StringArrayName
from NamePy.Structures.StringName import StringName

@typechecked
def from_data_string(data : str, delimiter : str = DEFAULT_DELIMITER, string_backed : bool = False) -> Name:
    """
    Parses the output of Name.as_data_string back into a Name that uses the given delimiter.
    The empty string is parsed as the name without components, so a name with a single empty component does not survive the round trip.
    """
    assert_is_valid_delimiter(delimiter)
    components : List[str] = []
    if data != "":
        for c in split_masked(data, DEFAULT_DELIMITER):
            # remask would hide a malformed escape
            assert_is_valid_component(c, DEFAULT_DELIMITER)
            components.append(remask(c, DEFAULT_DELIMITER, delimiter))

    if string_backed:
        return StringName.from_components(components, delimiter)
    return StringArrayName(components, delimiter)

@typechecked
def string_to_name(s : str, delimiter : str = DEFAULT_DELIMITER) -> Name:
    """
    Splits a human-readable string on every occurrence of the delimiter, there is no escaping.
    """
    assert_is_valid_delimiter(delimiter)
    return StringArrayName([mask(part, delimiter) for part in s.split(delimiter)], delimiter)

__all__ = ['from_data_string', 'string_to_name']
