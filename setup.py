from setuptools import setup, find_packages

setup(
    name="demandninja",
    version="0.1.0",
    description="Hourly building energy demand from weather via the BAIT temperature index",
    packages=find_packages(include=["demandninja", "demandninja.*"]),
    package_data={"demandninja": ["data/*.csv"]},
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
