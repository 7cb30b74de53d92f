from setuptools import find_packages, setup

setup(
    name="codeseq",
    version="0.1.0",
    description="Search, split and case-mapping primitives for sequences of Unicode code points.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["codeseq", "codeseq.*"]),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={
        "docs": ["sphinx", "myst_parser", "sphinx_autodoc_typehints", "sphinx_rtd_theme"],
    },
    zip_safe=False,
)
