# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="ooxmltree",
    version="0.1.0",
    description="Open OOXML packages as an editable file tree and repack them losslessly",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["ooxmltree*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'ooxmltree=ooxmltree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
