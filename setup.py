import pathlib
from setuptools import find_namespace_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
DESCRIPTION = (HERE / "README.md").read_text()

# Runtime requirements, one per line
REQUIRE = (HERE / "requirements.txt").read_text().splitlines()

setup(
    name="kubedash",
    version="0.0.1",
    description="Resource detail views for a cluster-management dashboard",
    long_description=DESCRIPTION,
    long_description_content_type="text/markdown",
    platforms="any",
    classifiers=[
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
    ],
    packages=find_namespace_packages(include=["kubedash", "kubedash.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=REQUIRE,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "kubedash = kubedash.cli.cmd:main",
        ]
    },
)
