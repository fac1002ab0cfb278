from setuptools import setup, find_packages

setup(
    name="loco_advisor",
    version="0.1.0",
    packages=find_packages(include=["loco_advisor", "loco_advisor.*"]),
    package_data={"loco_advisor": ["services/*.yaml"]},
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "httpx",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
        "examples": ["requests"],
    },
)
