import logging
from typing import TYPE_CHECKING, Iterable, Set

from NamePy.Files.FileErrors import ServiceFailureError
from NamePy.Structures.Masking import mask
from NamePy.Structures.Name import Name
from NamePy.Structures.NameErrors import InvalidArgumentError, InvalidStateError, NameContractError

if TYPE_CHECKING:
    from NamePy.Files.Directory import Directory

logger = logging.getLogger(__name__)

PATH_DELIMITER = '/'

class Node:
    def __init__(self, base_name : str, parent_node : 'Directory'):
        self.base_name = base_name
        self.parent_node = parent_node
        self.parent_node.add_child_node(self)

    def move(self, to : 'Directory'):
        self.parent_node.remove_child_node(self)
        to.add_child_node(self)
        self.parent_node = to

    def get_full_name(self) -> Name:
        """ Returns the name of the parent directory with the base name of this node appended. """
        return self.parent_node.get_full_name().append(mask(self.get_base_name(), PATH_DELIMITER))

    def get_base_name(self) -> str:
        return self.do_get_base_name()

    def do_get_base_name(self) -> str:
        return self.base_name

    def rename(self, base_name : str):
        self.do_set_base_name(base_name)

    def do_set_base_name(self, base_name : str):
        self.base_name = base_name

    def get_parent_node(self) -> 'Directory':
        return self.parent_node

    def find_nodes(self, base_name : str) -> Set['Node']:
        """
        Returns all nodes of the subtree rooted at this node whose base name is base_name (ignoring surrounding whitespace).
        If this node is the root, errors other than invalid arguments are reported as ServiceFailureError.
        """
        try:
            self.assert_is_valid_search_name(base_name)
            matches : Set[Node] = set()
            self.collect_nodes(base_name.strip(), matches)
            return matches
        except NameContractError as e:
            if not self.provides_file_system_service() or isinstance(e, InvalidArgumentError):
                raise
            logger.warning("find_nodes(%r) failed: %s", base_name, e)
            raise ServiceFailureError("find_nodes failed", e) from e

    def collect_nodes(self, base_name : str, matches : Set['Node']):
        if self.get_validated_base_name() == base_name:
            matches.add(self)
        for child in self.get_child_nodes():
            child.collect_nodes(base_name, matches)

    def get_child_nodes(self) -> Iterable['Node']:
        return []

    def get_validated_base_name(self) -> str:
        base_name = self.get_base_name()
        if not isinstance(base_name, str):
            raise InvalidStateError("invalid state: base name must be a string")
        if not self.allows_empty_base_name() and len(base_name) == 0:
            raise InvalidStateError("invalid state: base name must not be empty")
        return base_name

    def allows_empty_base_name(self) -> bool:
        return self.is_root_node()

    def assert_is_valid_search_name(self, base_name : str):
        if base_name is None:
            raise InvalidArgumentError("base name is None")
        if not isinstance(base_name, str):
            raise InvalidArgumentError("base name must be a string")
        if len(base_name.strip()) == 0:
            raise InvalidArgumentError("base name must not be empty")

    def provides_file_system_service(self) -> bool:
        return self.is_root_node()

    def is_root_node(self) -> bool:
        return self.parent_node is self

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.get_full_name().as_string()})"

__all__ = ['Node', 'PATH_DELIMITER']
