from setuptools import find_packages
from setuptools import setup

setup(
    name="kaplanmeier",
    version="0.1.0",
    description="Kaplan-Meier estimation of survivor functions from right-censored data.",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "click",
        "numba",
        "numpy>=1.23",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "kaplanmeier = kaplanmeier.cli:main",
        ],
    },
)
