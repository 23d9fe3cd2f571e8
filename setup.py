import pathlib
import re

from setuptools import setup, find_packages


def read_version():
    version_path = pathlib.Path(__file__).resolve().parent / "gapfill" / "__init__.py"
    match = re.search(
        r"^__version__\s*=\s*[\"']([^\"']+)[\"']",
        version_path.read_text(encoding="utf8"),
        re.MULTILINE,
    )
    if not match:
        raise RuntimeError("Unable to find __version__ in gapfill/__init__.py")
    return match.group(1)

with open("README.md", encoding="utf8") as f:
    long_description = f.read()

setup(
    name='gapfill',
    version=read_version(),
    description='Fill missing coordinates along a 2-D path by solving a tridiagonal system',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='gapfill developers',
    license='MIT',
    keywords='interpolation imputation missing-values tridiagonal path',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    packages=find_packages(exclude=("tests*", "docs*", "examples*")),
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.18.1',
        'scipy>=1.5',
        'pandas>=1.0.3',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False
)
