"""Exceptions raised by the disjoint-set forest and the MST builders."""


class MSTError(Exception):
    """Base class for every precondition failure in this project."""


class NullElementError(MSTError, TypeError):
    """A required element argument was None."""


class NullGraphError(MSTError, TypeError):
    """The graph argument was None."""


class AlreadyPresentError(MSTError, ValueError):
    """make_set was called on an element the forest already tracks."""


class NotPresentError(MSTError, ValueError):
    """The element was never inserted with make_set."""


class InvalidGraphError(MSTError, ValueError):
    """Graph is directed or has an edge with a missing or negative weight."""
