import setuptools

requirements = [
    "configargparse",
    "typing_extensions",
]

requirements_dev = [
    "pytest",
]

setuptools.setup(
    name="fsbox",
    version="0.1.0",
    description="Helper functions for path values and basic file I/O",
    url="https://pyuxiang.com",
    author="Justin",
    author_email="justin@pyuxiang.com",
    license="GPLv3",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=requirements,
    extras_require={
        "dev": requirements_dev,
        "test": requirements_dev,
    },
    entry_points={
        "console_scripts": [
            "fsbox=fsbox.cli:main",
        ],
    },
    python_requires=">=3.10",
)
