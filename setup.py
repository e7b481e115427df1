from setuptools import find_packages, setup

setup(
    name="filecopy",
    version="1.0.0",
    description="Copy a regular file to a file or into a directory",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "filecopy": ["logging/logger.conf"],
    },
    install_requires=[
        "pluggy>=1.3.0",
        "pydantic>=2",
        "pyyaml",
    ],
    extras_require={
        "dev": [
            "hypothesis",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "filecopy=filecopy.__main__:main",
            "filecopy-mmap=filecopy.__main__:main_mmap",
        ],
    },
)
