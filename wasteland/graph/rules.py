from abc import ABC, abstractmethod


class Matcher(ABC):
    @abstractmethod
    def is_satisfied_by(self, name):
        """
        Check if a walk may stop at the node with the given name.

        :param name: Name of the node the walk has just reached
        :return: True if the walk terminates here, False otherwise
        """
        pass

    def __call__(self, name):
        return self.is_satisfied_by(name)


class ExactName(Matcher):
    def __init__(self, target):
        self.target = target

    def is_satisfied_by(self, name):
        return name == self.target

    def __eq__(self, other):
        return isinstance(other, ExactName) and other.target == self.target

    def __hash__(self):
        return hash((ExactName, self.target))

    def __repr__(self):
        return f"ExactName({self.target!r})"


class SuffixMatch(Matcher):
    def __init__(self, suffix):
        if not suffix:
            raise ValueError("Suffix must not be empty")
        self.suffix = suffix

    def is_satisfied_by(self, name):
        return name.endswith(self.suffix)

    def __eq__(self, other):
        return isinstance(other, SuffixMatch) and other.suffix == self.suffix

    def __hash__(self):
        return hash((SuffixMatch, self.suffix))

    def __repr__(self):
        return f"SuffixMatch({self.suffix!r})"
