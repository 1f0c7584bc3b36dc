import logging
import sys

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version('addrange')
except _PackageNotFoundError:
    __version__ = 'unknown'

logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)

from .insert import insert
from .core import add_range, ArgumentAbsentError

from . import backends

__all__ = 'add_range', 'insert', 'ArgumentAbsentError', '__version__'


def test():
    """ Run the test-suite, doctests included, against the installed package """
    import pytest
    sys.path.insert(0, '.')
    return pytest.main(args=['-r', 'sxX', '--doctest-modules',
                             '--pyargs', 'addrange'])
