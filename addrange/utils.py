from contextlib import contextmanager


@contextmanager
def ignoring(*exceptions):
    """ Run a block, discarding the given exception types

    >>> with ignoring(KeyError):
    ...     {}['missing']
    """
    try:
        yield
    except exceptions:
        pass
