from setuptools import find_packages, setup

setup(
    name="pullclip",
    version="1.0.0",
    description="Gather local files, GitHub paths and URLs into the clipboard",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pathspec>=0.10",
        "pyperclip>=1.8",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pull=pullclip.cli:main",
        ]
    },
)
