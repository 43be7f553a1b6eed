from setuptools import setup, find_packages

setup(
    name="minesweeper_agent",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    package_data={
        "backend": ["config.yaml"],
    },
    python_requires=">=3.8",
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    entry_points={
        "console_scripts": [
            "minesweeper-ui=frontend.app:main",
            "minesweeper-eval=evaluation.evaluate:main"
        ]
    },
)
