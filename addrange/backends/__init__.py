from importlib import import_module as _imod
from ..utils import ignoring as _ignoring

_backend_names = ['numpy', 'pandas']

for name in _backend_names:
    with _ignoring(ImportError):
        _imod('.' + name, 'addrange.backends')
