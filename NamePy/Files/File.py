from enum import Enum
from typeguard import typechecked

from NamePy.Files.Directory import Directory
from NamePy.Files.Node import Node
from NamePy.Structures.NameErrors import InvalidArgumentError

class FileState(Enum):
    OPEN = 0
    CLOSED = 1
    DELETED = 2

class File(Node):
    def __init__(self, base_name : str, parent_node : Directory):
        self.state = FileState.CLOSED
        Node.__init__(self, base_name, parent_node)

    def open(self):
        self.assert_is_closed_file()
        self.state = FileState.OPEN

    @typechecked
    def read(self, no_bytes : int) -> bytes:
        self.assert_is_open_file()
        if no_bytes < 0:
            raise InvalidArgumentError(f"no_bytes must be non-negative, got: {no_bytes}")
        # there is no content behind a file yet
        return bytes()

    def close(self):
        self.assert_is_open_file()
        self.state = FileState.CLOSED

    def delete(self):
        self.assert_is_not_deleted()
        if self.is_open():
            self.close()
        self.parent_node.remove_child_node(self)
        self.state = FileState.DELETED

    def get_file_state(self) -> FileState:
        return self.state

    def is_open(self) -> bool:
        return self.state == FileState.OPEN

    def is_closed(self) -> bool:
        return self.state == FileState.CLOSED

    def is_deleted(self) -> bool:
        return self.state == FileState.DELETED

    # precondition assertions

    def assert_is_open_file(self):
        if self.state != FileState.OPEN:
            raise InvalidArgumentError("file must be open")

    def assert_is_closed_file(self):
        if self.state != FileState.CLOSED:
            raise InvalidArgumentError("file must be closed")

    def assert_is_not_deleted(self):
        if self.state == FileState.DELETED:
            raise InvalidArgumentError("file is deleted")

__all__ = ['File', 'FileState']
