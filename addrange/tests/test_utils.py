from importlib.metadata import PackageNotFoundError, version

import pytest

import addrange
from addrange.utils import ignoring


def test_ignoring():
    with ignoring(KeyError):
        {}['a']


def test_ignoring_reraises_others():
    with pytest.raises(ValueError):
        with ignoring(KeyError):
            raise ValueError()


def test_package_surface():
    assert set(addrange.__all__) == {'add_range', 'insert',
                                     'ArgumentAbsentError', '__version__'}


def test_version():
    try:
        installed = version('addrange')
    except PackageNotFoundError:
        pytest.skip('addrange is not installed')
    assert addrange.__version__ == installed == '0.1.0'
