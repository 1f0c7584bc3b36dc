import logging

from .insert import insert

logger = logging.getLogger(__name__)


class ArgumentAbsentError(ValueError):
    """ A required argument was ``None``

    Attributes
    ----------
    param_name : str
        Name of the parameter that was missing.
    """
    def __init__(self, param_name):
        self.param_name = param_name
        super(ArgumentAbsentError, self).__init__(param_name)

    def __str__(self):
        return "Argument %r must not be None" % self.param_name


def add_range(target, items):
    """ Add every element of ``items`` on to ``target``

    Each element is handed, in iteration order, to ``insert(target, item)``,
    the single element insertion registered for the container.  Whatever that
    insertion does is kept as is: sets drop duplicates, lists keep them,
    read-only containers raise.

    Parameters
    ----------
    target : mutable container
        The container to grow in place, e.g. ``list``, ``set``,
        ``collections.deque`` or any ``MutableSequence``/``MutableSet``.
    items : iterable
        The elements to add.  Consumed exactly once through a single
        iterator; a generator is never run past a failed insertion.
        If ``items`` is ``target`` itself, the elements present at call time
        are added, as with ``list.extend``.  Other aliasing, such as
        ``iter(target)``, is not detected.

    Raises
    ------
    ArgumentAbsentError
        If ``target`` or ``items`` is ``None``.  Nothing is inserted.

    Errors raised by the insertion itself propagate unchanged and leave the
    elements inserted before the failure in ``target``.

    Examples
    --------

    >>> names = ['Alice']
    >>> add_range(names, ('Bob', 'Charlie'))
    >>> names
    ['Alice', 'Bob', 'Charlie']

    >>> numbers = {1, 2, 3}
    >>> add_range(numbers, [3, 4, 5, 5])
    >>> sorted(numbers)
    [1, 2, 3, 4, 5]

    >>> evens = []
    >>> add_range(evens, (n for n in range(1, 11) if n % 2 == 0))
    >>> evens
    [2, 4, 6, 8, 10]

    See Also
    --------

    insert
    """
    if target is None:
        raise ArgumentAbsentError('target')
    if items is None:
        raise ArgumentAbsentError('items')

    if items is target:
        # can't iterate a container while it grows
        items = list(items)

    n = 0
    for item in items:
        insert(target, item)
        n += 1

    logger.debug('Inserted %d elements into %s', n, type(target).__name__)
