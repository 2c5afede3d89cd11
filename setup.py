# setup.py
from setuptools import setup, find_packages

setup(
    name="lisp-compute",
    version="0.1.0",
    description="A minimal Scheme-flavoured expression evaluator and program runner",
    python_requires=">=3.10",
    packages=find_packages(include=["lisp_compute", "lisp_compute.*", "lisp_compute_lsp"]),
    package_data={"lisp_compute": ["examples/*.scm"]},
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
