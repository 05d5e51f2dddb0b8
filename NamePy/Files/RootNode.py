from typing import Set
from typing_extensions import override

from NamePy.Files.Directory import Directory
from NamePy.Files.Node import PATH_DELIMITER, Node
from NamePy.Structures.Name import Name
from NamePy.Structures.StringArrayName import StringArrayName

class RootNode(Directory):
    """ The root of a node tree is its own parent and has the empty name. """
    def __init__(self):
        self.child_nodes : Set[Node] = set()
        self.base_name = ""
        self.parent_node = self

    @override
    def get_full_name(self) -> Name:
        return StringArrayName([], PATH_DELIMITER)

    @override
    def move(self, to : Directory):
        # the root stays where it is
        pass

    @override
    def do_set_base_name(self, base_name : str):
        # the root keeps the empty name
        pass

__all__ = ['RootNode']
