#!/usr/bin/env python3

# The version is kept in pyproject.toml, so that we have a single source of data.

import re
from pathlib import Path

from setuptools import setup

long_description = '''Parser for the text decoded from barcodes.

It recognizes WiFi configuration (the "WIFI:S:...;P:...;T:...;;" format), URLs and plain text, \
and can generate the text for WiFi QR codes.
'''

SOURCE_DIR = Path(__file__).parent


def get_version():
    '''
    Get version string from pyproject.toml, so that we have a single source of data.
    '''
    filepath = SOURCE_DIR / 'pyproject.toml'
    content = filepath.read_text()
    m = re.search(r'version\s*=\s*"([.\-\w]+)"', content)
    return m.group(1)


setup(
    name='barcontent',
    long_description=long_description,
    version=get_version(),
    description='Parser for the text content of barcodes, with focus on WiFi QR codes',
    python_requires='>=3.11',
    author='Nguyễn Hồng Quân',
    author_email='ng.hong.quan@gmail.com',
    license='GPL-3.0-or-later',
    url='https://github.com/hongquan/CoBang',
    entry_points={"console_scripts": ["barcontent = barcontent.__main__:main"]},
    packages=['barcontent'],
    package_dir={"": "."},
    install_requires=[
        'logbook==1.*,>=1.5.3', 'single-version==1.*,>=1.1.0', 'click>=8.2',
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
        ]
    },
)
