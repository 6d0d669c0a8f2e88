import os

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "sfutils", "__version__.py")) as f:
    exec(f.read(), about)


def read(filename):
    with open(os.path.join(here, filename), 'rb') as f:
        return f.read().decode('utf-8')


setup(
    name='sfutils',
    version=about['__version__'],
    description=('Sort and match HTTP media types expressed as structured field items,'
                 ' following the content negotiation rules of RFC 9110.'),
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    entry_points='''
        [console_scripts]
        sfutils-mediatype=sfutils.command_line:main
    ''',
    install_requires=[
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=find_packages(),
    license='MPL-2.0',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ]
)
