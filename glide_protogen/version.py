# SPDX-License-Identifier: Apache-2.0
import importlib.metadata

try:
    # Written by setuptools_scm when building from a git checkout.
    from ._version import __version__
except ImportError:
    try:
        __version__ = importlib.metadata.version("glide-protogen")
    except importlib.metadata.PackageNotFoundError:
        import warnings

        warnings.warn(
            "glide-protogen is neither installed nor built from git; "
            "reporting version 'dev'",
            RuntimeWarning,
            stacklevel=2,
        )
        __version__ = "dev"
