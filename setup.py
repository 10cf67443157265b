from setuptools import find_packages, setup

setup(
    name="securekit",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.10",
    install_requires=[
        "bcrypt>=4.0,<6",
        "pydantic>=2.0,<3",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
