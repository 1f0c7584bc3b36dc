from importlib.util import find_spec

collect_ignore = ['setup.py']

# backend modules import their library at module level
for name in ['numpy', 'pandas']:
    if find_spec(name) is None:
        collect_ignore.append('addrange/backends/%s.py' % name)
