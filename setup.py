from setuptools import setup, find_packages

# Version info -- read without importing
_locals = {}
with open('ZSKR/_version.py') as fp:
    exec(fp.read(), None, _locals)
version = _locals['__version__']

with open("README.rst", "r") as fh:
    long_description = fh.read()

setup(
    name = "ZSKR",
    version = version,
    author = "Axel Rau",
    author_email = "axel.rau@chaos1.de",
    description = "DNSsec ZSK rollover with pre-published keys",
    long_description = long_description,
    long_description_content_type="text/x-rst",
    packages = find_packages(exclude=['tests', 'tests.*']),
    entry_points = {
        'console_scripts': [
            'operate_zskr = ZSKR.operate:main',
        ],
    },
    license = 'GPLv3',
    classifiers = [
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Operating System :: POSIX',
        'Topic :: Internet',
        'Topic :: Security :: Cryptography',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Natural Language :: English',
    ],
    python_requires='>=3.8',
    install_requires=[
        'dnspython>=2.0.0',
    ],
    extras_require={
        'test': ['pytest>=6.0'],
    },
)
