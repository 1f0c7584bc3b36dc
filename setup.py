from itertools import chain
import os
import sys
from setuptools import setup, find_packages


def read(filename):
    with open(filename, 'r') as f:
        return f.read()


def read_reqs(filename):
    return read(filename).strip().splitlines()


def install_requires():
    return read_reqs('etc/requirements.txt')


def extras_require():
    extras = {req: read_reqs('etc/requirements_%s.txt' % req)
              for req in {'numpy',
                          'pandas',
                          'test'}}

    # don't include the 'test' target in 'all'
    extras['all'] = list(chain.from_iterable(v for k, v in extras.items()
                                             if k != 'test'))
    return extras


def setup_package():
    src_path = os.path.dirname(os.path.abspath(sys.argv[0]))
    old_path = os.getcwd()
    os.chdir(src_path)
    sys.path.insert(0, src_path)

    metadata = dict(
        name='addrange',
        version='0.1.0',
        description='Add every element of an iterable to any mutable container',
        license='BSD',
        keywords='collections extend add_range bulk insert',
        packages=find_packages(),
        install_requires=install_requires(),
        extras_require=extras_require(),
        long_description=read('README.rst'),
        include_package_data=True,
        zip_safe=False,
        python_requires='>=3.8',
        classifiers=[
            "Development Status :: 4 - Beta",
            "License :: OSI Approved :: BSD License",
            "Programming Language :: Python :: 3",
            "Operating System :: OS Independent",
        ],
    )

    try:
        setup(**metadata)
    finally:
        del sys.path[0]
        os.chdir(old_path)

if __name__ == '__main__':
    setup_package()
