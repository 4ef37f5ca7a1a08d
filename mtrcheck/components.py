"""Test case components and sets of them."""

from enum import Enum


class Component(Enum):
    """A kind of file that belongs to a test case."""

    TEST = "test"
    RESULT = "result"
    CNF = "cnf"
    OPT = "opt"
    OPT_MASTER = "opt_master"
    OPT_SLAVE = "opt_slave"
    OPT_CLIENT = "opt_client"
    SH_MASTER = "sh_master"
    SH_SLAVE = "sh_slave"
    COMBINATIONS = "combinations"

    def __str__(self):
        return self.value


class ComponentSet:
    """The set of components found for one test case."""

    def __init__(self, components=()):
        self._members = set()
        for component in components:
            self.add(component)

    def add(self, component):
        self._members.add(Component(component))

    def __contains__(self, component):
        return component in self._members

    def __iter__(self):
        return (c for c in Component if c in self._members)

    def __len__(self):
        return len(self._members)

    def __eq__(self, other):
        if not isinstance(other, ComponentSet):
            return NotImplemented
        return self._members == other._members

    def is_consistent(self):
        """True if the test case has a test and a result and no clashing options."""
        if Component.TEST not in self or Component.RESULT not in self:
            return False
        if Component.OPT in self and (
            Component.OPT_MASTER in self or Component.OPT_SLAVE in self
        ):
            return False
        return True

    def __str__(self):
        return "[" + ",".join(f" {c}" for c in self) + " ]"

    def __repr__(self):
        return f"ComponentSet({[c.name for c in self]!r})"