from setuptools import setup, find_packages

setup(
    name="octopusenergyapi",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "pandas>=1.5",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    description="Client for the Octopus Energy REST API: meter points, consumption and tariff products.",
    author="",
    author_email="",
    include_package_data=True,
)
