from abc import ABC, abstractmethod


class Identifiable(ABC):
    """
    Anything that exposes a stable, unique string identifier.
    Users and catalog items both implement it so a transaction can report
    IDs without caring which kind of entity it references.
    """

    @abstractmethod
    def id(self) -> str:
        """Return the unique identifier. Must not have side effects."""
