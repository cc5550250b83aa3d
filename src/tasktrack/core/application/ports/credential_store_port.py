from abc import ABC, abstractmethod


class CredentialStorePort(ABC):
    @abstractmethod
    def read(self, key: str) -> str | None:
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def clear(self, key: str) -> None:
        pass
