# Contract errors, all of them signal a bug somewhere
class NameContractError(Exception):
    def __init__(self, message : str):
        self.message = message
        super().__init__(message)

# Caller bugs: a precondition did not hold
class InvalidArgumentError(NameContractError):
    def __init__(self, message : str):
        super().__init__(message)

# Internal bugs: a postcondition did not hold
class MethodFailedError(NameContractError):
    def __init__(self, message : str):
        super().__init__(message)

# Internal bugs: a class invariant did not hold
class InvalidStateError(NameContractError):
    def __init__(self, message : str):
        super().__init__(message)

__all__ = ['NameContractError', 'InvalidArgumentError', 'MethodFailedError', 'InvalidStateError']
