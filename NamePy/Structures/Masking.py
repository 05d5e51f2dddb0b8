import logging
from typing import List, Sequence
from typeguard import typechecked

from NamePy.Structures.NameErrors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = '.'
ESCAPE_CHARACTER = '\\'

def check_delimiter(delimiter : str):
    """ A delimiter is a single character other than the escape character. """
    if len(delimiter) != 1:
        logger.debug("precondition failed: delimiter %r is not a single character", delimiter)
        raise InvalidArgumentError(f"delimiter must be a single character, got: '{delimiter}' (length: {len(delimiter)})")
    if delimiter == ESCAPE_CHARACTER:
        logger.debug("precondition failed: delimiter %r is the escape character", delimiter)
        raise InvalidArgumentError(f"delimiter must not be the escape character '{ESCAPE_CHARACTER}'")

@typechecked
def mask(raw : str, delimiter : str = DEFAULT_DELIMITER) -> str:
    """
    Escapes every occurrence of the delimiter and of the escape character in raw, so that the result can be joined with the delimiter unambiguously.
    """
    check_delimiter(delimiter)
    result : List[str] = []
    for char in raw:
        if char == delimiter or char == ESCAPE_CHARACTER:
            result.append(ESCAPE_CHARACTER)
        result.append(char)
    return "".join(result)

@typechecked
def unmask(masked : str) -> str:
    """
    Inverse of mask. An escape character at the very end of the string has nothing to escape and is copied as is.
    """
    result : List[str] = []
    i = 0
    while i < len(masked):
        if masked[i] == ESCAPE_CHARACTER and i + 1 < len(masked):
            result.append(masked[i + 1])
            i += 2
        else:
            result.append(masked[i])
            i += 1
    return "".join(result)

@typechecked
def is_properly_masked(masked : str, delimiter : str = DEFAULT_DELIMITER) -> bool:
    """
    Returns True if masked contains no unescaped delimiter and every escape character escapes either the delimiter or another escape character.
    """
    check_delimiter(delimiter)
    i = 0
    while i < len(masked):
        char = masked[i]
        if char == ESCAPE_CHARACTER:
            if i + 1 >= len(masked):
                return False
            if masked[i + 1] != delimiter and masked[i + 1] != ESCAPE_CHARACTER:
                return False
            i += 2
        elif char == delimiter:
            return False
        else:
            i += 1
    return True

@typechecked
def split_masked(masked : str, delimiter : str = DEFAULT_DELIMITER) -> List[str]:
    """
    Splits a string of masked components joined by the delimiter back into its components.
    An escape character together with the following character is never split; a trailing escape character stays in the last component.
    Always returns at least one component, "" is parsed as a single empty component.
    """
    check_delimiter(delimiter)
    components : List[str] = []
    current : List[str] = []
    i = 0
    while i < len(masked):
        if masked[i] == ESCAPE_CHARACTER and i + 1 < len(masked):
            current.append(masked[i : i + 2])
            i += 2
        elif masked[i] == delimiter:
            components.append("".join(current))
            current = []
            i += 1
        else:
            current.append(masked[i])
            i += 1
    components.append("".join(current))
    return components

def join_masked(components : Sequence[str], delimiter : str = DEFAULT_DELIMITER) -> str:
    check_delimiter(delimiter)
    return delimiter.join(components)

def remask(masked : str, from_delimiter : str, to_delimiter : str) -> str:
    """ Converts a component masked for from_delimiter into one masked for to_delimiter. """
    if from_delimiter == to_delimiter:
        return masked
    return mask(unmask(masked), to_delimiter)

__all__ = ['DEFAULT_DELIMITER', 'ESCAPE_CHARACTER', 'check_delimiter', 'mask', 'unmask', 'is_properly_masked', 'split_masked', 'join_masked', 'remask']
