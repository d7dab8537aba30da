from setuptools import find_packages, setup

setup(
    name="a11yfix",
    version="0.3.0",
    description="Reconcile model-suggested accessibility fixes with HTML sources",
    packages=find_packages(include=["a11yfix", "a11yfix.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "rich",  # Diff coloring and terminal output
        "typer<0.26",  # CLI (0.26+ vendors click, hiding its context from click.get_current_context)
        "click>=8.2",  # Context lookup for display format
        "pydantic>=2",  # Configuration models
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "a11yfix=a11yfix.cli:main",
        ],
    },
)
