import os
import sys

# -- Path setup --------------------------------------------------------------
# Add project root to sys.path to import the package
sys.path.insert(0, os.path.abspath(".."))

# -- Project information -----------------------------------------------------
project = "tpnkit"
author = "tpnkit developers"

# Dynamically detect version:
# 1) Try package metadata (requires pip install -e .)
# 2) Fallback to tpnkit.__version__ if available
from importlib.metadata import version as _get_version, PackageNotFoundError


try:
    release = _get_version("tpnkit")
except PackageNotFoundError:
    try:
        import tpnkit

        release = tpnkit.__version__
    except (ImportError, AttributeError):
        release = "0.1.0"
# Use only major.minor for short version
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.githubpages",
]

templates_path = ["_templates"]
exclude_patterns = []
autosectionlabel_prefix_document = True

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
}

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]
