"""Person domain object."""

from dataclasses import dataclass


@dataclass
class Person:
    """Represents a person, such as a magazine editor.

    Two people are equal when their names are equal. The hash is derived
    from the name, so renaming a Person that is already a dict key or set
    member leaves it unreachable under its new hash.

    Attributes:
        name: Display name, compared ordinally
    """

    name: str

    def __hash__(self) -> int:
        return hash(self.name)

    def deep_copy(self) -> "Person":
        return Person(name=self.name)
