from setuptools import setup, find_packages

setup(
    name="implibgen",
    description="Standalone python3(y).dll import library generator",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["python", "windows", "mingw", "msvc", "dlltool", "cross-compile"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests",)),
    package_data={"implibgen": ["defs/*.def", "defs/manifest.toml"]},
    install_requires=[
        "returns>=0.19",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    use_scm_version={"fallback_version": "0.1.0"},
)
