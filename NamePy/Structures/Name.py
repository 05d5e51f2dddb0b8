from abc import abstractmethod
from typing import Optional

class Name:
    """
    A name is a sequence of string components separated by a delimiter character.
    Special characters within a component need masking if they are to appear verbatim. There are only two special characters, the delimiter character and the escape character. The escape character is fixed, the delimiter character can be chosen per name.

    Examples:
    - "oss.cs.fau.de" is a name with four components and the delimiter '.'
    - "///" is a name with four empty components and the delimiter '/'
    - "Oh\\.\\.\\." is a name with one component if the delimiter is '.'

    Names are values: every editing method returns a new Name and leaves the receiver unchanged.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError(f"Method is_empty not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_no_components(self) -> int:
        raise NotImplementedError(f"Method get_no_components not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_component(self, i : int) -> str:
        """ Returns the masked component at index i. """
        raise NotImplementedError(f"Method get_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def set_component(self, i : int, c : str) -> 'Name':
        """ Returns a new Name with the component at index i replaced by the masked component c. """
        raise NotImplementedError(f"Method set_component not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def insert(self, i : int, c : str) -> 'Name':
        """ Returns a new Name with the masked component c inserted at index i, 0 <= i <= get_no_components(). """
        raise NotImplementedError(f"Method insert not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def append(self, c : str) -> 'Name':
        raise NotImplementedError(f"Method append not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def remove(self, i : int) -> 'Name':
        raise NotImplementedError(f"Method remove not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def concat(self, other : 'Name') -> 'Name':
        """ Returns a new Name with all components of other appended, in order. """
        raise NotImplementedError(f"Method concat not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def as_string(self, delimiter : Optional[str] = None) -> str:
        """
        Returns a human-readable representation: the unmasked components joined by the given delimiter, or by the name's own delimiter if none is given.
        The result cannot always be parsed back.
        """
        raise NotImplementedError(f"Method as_string not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def as_data_string(self) -> str:
        """
        Returns a machine-readable representation: the components masked for DEFAULT_DELIMITER and joined by it, regardless of the name's own delimiter.
        """
        raise NotImplementedError(f"Method as_data_string not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def is_equal(self, other : 'Name') -> bool:
        raise NotImplementedError(f"Method is_equal not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_hash_code(self) -> int:
        raise NotImplementedError(f"Method get_hash_code not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def clone(self) -> 'Name':
        raise NotImplementedError(f"Method clone not implemented for class {self.__class__.__name__}")

    @abstractmethod
    def get_delimiter_character(self) -> str:
        raise NotImplementedError(f"Method get_delimiter_character not implemented for class {self.__class__.__name__}")

    def __eq__(self, other : object) -> bool:
        if self is other: return True
        if not isinstance(other, Name): return False
        return self.is_equal(other)

    def __hash__(self) -> int:
        return self.get_hash_code()

    def __str__(self) -> str:
        return self.as_data_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_data_string()!r}, delimiter={self.get_delimiter_character()!r})"

__all__ = ['Name']
