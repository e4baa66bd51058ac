from abc import ABC, abstractmethod


class CodecPort(ABC):
    """A streaming compression transform with an explicit lifecycle.

    ``initialize`` acquires codec resources, ``transform`` turns one complete
    input into one complete compressed stream and may be called repeatedly
    between the two, ``finalize`` releases the resources.
    """

    @abstractmethod
    def initialize(self) -> None:
        ...

    @abstractmethod
    def transform(self, data: bytes) -> bytes:
        ...

    @abstractmethod
    def finalize(self) -> None:
        ...
