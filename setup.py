# python setup.py build_ext -i clean
import os
import sys

from Cython.Build import cythonize
from setuptools import Extension, setup

try:
    import numpy as np
except ImportError:
    raise RuntimeError(
        "NumPy is required to build this package. Please install it first."
    )

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
}

NUMPY_C_API = [
    ("NPY_NO_DEPRECATED_API", "NPY_1_9_API_VERSION")
]

pyx_files = [
    (
        "depq.smmh.symmetric_min_max_heap",
        "depq/smmh/symmetric_min_max_heap.pyx"
    ),
]


def create_extensions(pyx_files: list[tuple]) -> list[Extension]:
    """
    Create Cython extension for all available .pyx files.

    Parameters
    ----------
    pyx_files : list[tuple]
        A list of tuples. The first element of the tuple is the .pyx file in
        `package.module` format. The second element is the `path` to the file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    extensions = []
    for module_name, pyx_path in pyx_files:
        extra_compile_args = [
            f"-D{name}={value}"
            for name, value in NUMPY_C_API
        ]

        if sys.platform != "win32":
            extra_compile_args.append("-O3")

        extension = Extension(
            name=module_name,
            sources=[pyx_path],
            include_dirs=[np.get_include()],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Main setup function for compiling"""
    # Filter out non-existing files
    files = [
        (name, path)
        for name, path in pyx_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No .pyx files found to compile")

    extensions = create_extensions(files)

    setup(
        ext_modules=cythonize(
            extensions,
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        ),
        packages=["depq", "depq.smmh"],
        zip_safe=False
    )


if __name__ == "__main__":
    main()
