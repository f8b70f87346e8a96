from setuptools import setup, find_packages

setup(
    name="tinted",
    version="0.1.0",
    description="ANSI terminal styling with colorability detection and code stripping",
    packages=find_packages(include=["tinted", "tinted.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
