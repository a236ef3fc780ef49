from setuptools import find_packages, setup


setup(
    name="condtpl",
    version="0.1.0",
    description="Conditional-block text templates: /*if:flag*/ … /*endif*/",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
)
