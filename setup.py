import setuptools
from pathlib import Path

ROOT = Path(__file__).parent


def read_requirements(filename: str = "requirements.txt") -> list[str]:
    """Return the requirement specifiers in `filename`, comments stripped."""
    path = ROOT / filename
    if not path.is_file():
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    specs = (line.split("#", 1)[0].strip() for line in lines)
    return [spec for spec in specs if spec]


long_description = (ROOT / "README_PYPI.md").read_text(encoding="utf-8")

setuptools.setup(
    name="stemtensor",
    version="0.1.0",
    author="stemtensor developers",
    maintainer="stemtensor developers",
    description=(
        "stemtensor is a strided N-dimensional tensor engine with pluggable "
        "linear storage, zero-copy windows and transposition, and "
        "layout-independent traversal."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    keywords=["tensor", "strided", "ndarray", "numpy"],
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=False,
)
