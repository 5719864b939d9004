class PyoiterError(Exception):
    """Base class of the errors raised by pyoiter itself.

    Errors raised by user supplied callables (predicates, key functions, folds) or by source iterators are never wrapped.
    """


class ConfigurationError(PyoiterError, ValueError):
    """Raised at call time when a combinator receives structurally invalid arguments.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.tools.islice([1, 2, 3], 0, 3, 0)
    Traceback (most recent call last):
        ...
    pyoiter._errors.ConfigurationError: islice step must be a positive integer, got 0

    ```
    """


class EmptyInputError(PyoiterError, ValueError):
    """Raised by reductions that need at least one element when the source is empty.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Iter.new().first()
    Traceback (most recent call last):
        ...
    pyoiter._errors.EmptyInputError: called `first` on an empty Iter

    ```
    """
