"""Classifier exceptions. All of them are fatal for the run."""


class ClassifierError(Exception):
    """Base class for classification failures."""


class DecodeError(ClassifierError):
    """Raised when file content cannot be decoded to text."""


class LineOutOfRangeError(ClassifierError):
    """Raised when a changed line number is beyond the file's line count.

    This means the recorded diff and the content being read disagree.
    """


class PatternError(ClassifierError):
    """Raised when a pattern built from a language syntax does not compile."""
