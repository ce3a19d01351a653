"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from VERSION
with open(ver_file, 'r') as f:
    __version__ = f.read().strip()

if not re.match(r'^\d+\.\d+\.\d+(?:\.?[a-zA-Z0-9]+)?$', __version__):
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodistance",
    version=__version__,
    author="",
    author_email="",
    description="Geodesic distances between coordinates on reference ellipsoids.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodistance*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geodistance": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
        'typing_extensions>=4.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
