""" Single element insertion, dispatched on the type of the container

>>> data = [1, 2, 3]
>>> insert(data, 4)
>>> data
[1, 2, 3, 4]

>>> s = {1, 2}
>>> insert(s, 2)
>>> sorted(s)
[1, 2]

New containers are supported by registering on ``insert``; ``add_range``
dispatches through the same registry for every element.
"""
from array import array
from collections.abc import MutableSequence, MutableSet, Sequence, Set

from multipledispatch import Dispatcher

insert = Dispatcher('insert')


@insert.register(object, object)
def insert_not_found(target, item):
    raise NotImplementedError("Don't know how to insert elements into type "
                              "%s" % type(target).__name__)


@insert.register((list, array, MutableSequence), object)
def insert_into_sequence(target, item):
    target.append(item)


@insert.register((set, MutableSet), object)
def insert_into_set(target, item):
    target.add(item)


@insert.register((Sequence, Set), object)
def read_only(target, item):
    """ Reject insertion into a container that can not grow in place

    Registered for immutable sequences and sets and reused by backends for
    fixed-size containers.

    >>> insert((1, 2), 3)
    Traceback (most recent call last):
        ...
    TypeError: tuple object is read-only and does not support insertion
    """
    raise TypeError("%s object is read-only and does not support insertion" %
                    type(target).__name__)
