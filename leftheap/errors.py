"""Exceptions raised by the priority queue."""


class QueueError(Exception):
    """Base class for every error raised by this package."""

    default_message = ""

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class IndexOutOfBoundError(QueueError, IndexError):
    """An index lies outside the container."""

    default_message = "index out of bound"


class ComparisonError(QueueError, RuntimeError):
    """The ordering function failed while the queue was being rearranged."""

    default_message = "comparison failed"


class InvalidIteratorError(QueueError, ValueError):
    """An iterator or position no longer refers to the container."""

    default_message = "invalid iterator"


class ContainerIsEmptyError(QueueError, IndexError):
    """An element was requested from an empty container."""

    default_message = "container is empty"