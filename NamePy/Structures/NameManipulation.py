from typing import List

from NamePy.Structures.Masking import DEFAULT_DELIMITER, mask, remask, unmask
from NamePy.Structures.Name import Name

def as_string(name : Name, delimiter : str) -> str:
    components : List[str] = []
    for i in range(name.get_no_components()):
        components.append(unmask(name.get_component(i)))
    return delimiter.join(components)

def as_data_string(name : Name) -> str:
    components : List[str] = []
    for i in range(name.get_no_components()):
        components.append(mask(unmask(name.get_component(i)), DEFAULT_DELIMITER))
    return DEFAULT_DELIMITER.join(components)

def structurally_equal(l : Name, r : Name) -> bool:
    """
    Two names are equal if they have the same number of components and the same masked text at every index. The delimiters are not compared, they only affect presentation.
    """
    if l is r:
        return True
    if l.get_no_components() != r.get_no_components():
        return False
    for i in range(l.get_no_components()):
        if l.get_component(i) != r.get_component(i):
            return False
    return True

def string_hash_code(s : str) -> int:
    """
    Polynomial rolling hash h = 31 * h + code point, wrapped to a signed 32 bit integer after every step.
    """
    hash_code = 0
    for char in s:
        hash_code = (hash_code * 31 + ord(char)) & 0xFFFFFFFF
    if hash_code >= 0x80000000:
        hash_code -= 0x100000000
    return hash_code

def name_hash_code(name : Name) -> int:
    return string_hash_code(as_data_string(name))

def concat(l : Name, r : Name) -> Name:
    """
    Appends the components of r to l, one at a time. Components of r are re-masked for the delimiter of l.
    """
    result = l.clone()
    for i in range(r.get_no_components()):
        c = remask(r.get_component(i), r.get_delimiter_character(), l.get_delimiter_character())
        result = result.append(c)
    return result

__all__ = ['as_string', 'as_data_string', 'structurally_equal', 'string_hash_code', 'name_hash_code', 'concat']
