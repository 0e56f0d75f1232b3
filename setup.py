from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "jinja2>=3.1",
    "typer>=0.9",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="leipzig-gloss",
    version="0.1.0",
    packages=find_packages(include=["leipzig", "leipzig.*"]),
    package_data={"leipzig.rendering": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "leipzig=leipzig.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Interlinear glossed text rendering with Leipzig-style abbreviation tagging",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
