from setuptools import find_packages, setup


setup(
    name="streamsplit",
    version="1.0.0",
    description=(
        "Splits byte streams of unknown length by a multi-byte separator"
    ),
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    extras_require={"test": ["pytest"]},
)
