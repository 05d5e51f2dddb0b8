from typing import Iterable, Set
from typing_extensions import override

from NamePy.Files.Node import Node

class Directory(Node):
    def __init__(self, base_name : str, parent_node : 'Directory'):
        self.child_nodes : Set[Node] = set()
        Node.__init__(self, base_name, parent_node)

    def has_child_node(self, child : Node) -> bool:
        return child in self.child_nodes

    def add_child_node(self, child : Node):
        self.child_nodes.add(child)

    def remove_child_node(self, child : Node):
        self.child_nodes.discard(child)

    @override
    def get_child_nodes(self) -> Iterable[Node]:
        return list(self.child_nodes)

__all__ = ['Directory']
