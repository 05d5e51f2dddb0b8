from typing import Optional

class ServiceFailureError(Exception):
    def __init__(self, message : str, trigger : Optional[Exception] = None):
        self.message = message
        self.trigger = trigger
        super().__init__(message)

__all__ = ['ServiceFailureError']
