import functools
import logging
from typing import Any, Callable, Concatenate, Optional, ParamSpec, TypeVar

from NamePy.Structures.Masking import ESCAPE_CHARACTER, check_delimiter, is_properly_masked
from NamePy.Structures.Name import Name
from NamePy.Structures.NameErrors import InvalidArgumentError, InvalidStateError, MethodFailedError

logger = logging.getLogger(__name__)

# preconditions are always checked, postconditions and class invariants only if this is set
should_check_postconditions = True

T = TypeVar("T")
P = ParamSpec("P")

# precondition assertions

def assert_is_not_none(obj : Any, what : str = "object"):
    if obj is None:
        logger.debug("precondition failed: %s is None", what)
        raise InvalidArgumentError(f"{what} is None")

def assert_is_instance(obj : Any, cls : type, what : str = "object"):
    if not isinstance(obj, cls):
        logger.debug("precondition failed: %s is a %s, not a %s", what, obj.__class__.__name__, cls.__name__)
        raise InvalidArgumentError(f"{what} must be a {cls.__name__}, got {obj.__class__.__name__}")

def assert_is_valid_delimiter(delimiter : Any):
    assert_is_not_none(delimiter, "delimiter")
    assert_is_instance(delimiter, str, "delimiter")
    check_delimiter(delimiter)

def assert_is_index(i : Any):
    assert_is_not_none(i, "index")
    # bool is a subclass of int, but True is not a meaningful index
    if isinstance(i, bool) or not isinstance(i, int):
        logger.debug("precondition failed: index %r is not an integer", i)
        raise InvalidArgumentError(f"index must be an integer, got {i.__class__.__name__}")

def assert_is_valid_index(i : Any, no_components : int):
    assert_is_index(i)
    if not (0 <= i < no_components):
        logger.debug("precondition failed: index %d not in [0, %d)", i, no_components)
        raise InvalidArgumentError(f"index out of bounds: {i} (valid range: 0 to {no_components - 1})")

def assert_is_valid_insert_index(i : Any, no_components : int):
    assert_is_index(i)
    if not (0 <= i <= no_components):
        logger.debug("precondition failed: insert index %d not in [0, %d]", i, no_components)
        raise InvalidArgumentError(f"insert index out of bounds: {i} (valid range: 0 to {no_components})")

def assert_is_valid_component(c : Any, delimiter : str):
    assert_is_not_none(c, "component")
    assert_is_instance(c, str, "component")
    if not is_properly_masked(c, delimiter):
        logger.debug("precondition failed: component %r is not masked for %r", c, delimiter)
        raise InvalidArgumentError(f"component '{c}' is not properly masked for delimiter '{delimiter}'")

def assert_is_name(other : Any, what : str = "other"):
    assert_is_not_none(other, what)
    assert_is_instance(other, Name, what)

# postcondition assertions

def assert_postcondition(condition : bool, message : str):
    if should_check_postconditions and not condition:
        logger.debug("postcondition failed: %s", message)
        raise MethodFailedError(message)

def assert_component_count(result : Name, expected : int, method : str):
    if not should_check_postconditions: return
    got = result.get_no_components()
    assert_postcondition(got == expected, f"{method} failed: expected {expected} components, got {got}")

def assert_component_at(result : Name, i : int, c : str, method : str):
    if not should_check_postconditions: return
    assert_postcondition(result.get_component(i) == c, f"{method} failed: component at {i} is not '{c}'")

# class invariant assertions

def assert_class_invariants(name : Name):
    if not should_check_postconditions: return
    no_components = name.get_no_components()
    if no_components < 0:
        raise InvalidStateError(f"invalid state: number of components is negative ({no_components})")
    delimiter : Optional[str] = name.get_delimiter_character()
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidStateError(f"invalid state: delimiter {delimiter!r} is not a single character")
    if delimiter == ESCAPE_CHARACTER:
        raise InvalidStateError("invalid state: delimiter is the escape character")
    for i in range(no_components):
        c = name.get_component(i)
        if not is_properly_masked(c, delimiter):
            raise InvalidStateError(f"invalid state: component {i} ('{c}') is not properly masked")

def ensures_class_invariants(fn : Callable[Concatenate[Name, P], T]) -> Callable[Concatenate[Name, P], T]:
    """
    Checks the class invariants of the receiver and, if a Name is returned, of the result, after every call of fn.
    """
    @functools.wraps(fn)
    def wrapper(self_arg : Name, *args : P.args, **kwargs : P.kwargs) -> T:
        result = fn(self_arg, *args, **kwargs)
        assert_class_invariants(self_arg)
        if isinstance(result, Name) and result is not self_arg:
            assert_class_invariants(result)
        return result
    return wrapper

__all__ = [
    'assert_is_not_none', 'assert_is_instance', 'assert_is_valid_delimiter', 'assert_is_index', 'assert_is_valid_index', 'assert_is_valid_insert_index',
    'assert_is_valid_component', 'assert_is_name', 'assert_postcondition', 'assert_component_count', 'assert_component_at',
    'assert_class_invariants', 'ensures_class_invariants'
]
