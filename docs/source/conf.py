# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from pathlib import Path

# -- Project information -----------------------------------------------------

project = "Portfolio Site"
author = "Portfolio Site maintainers"
release = "v0.1"

# repo_root = docs/source/../../
REPO_ROOT = Path(__file__).resolve().parents[2]

# -- General configuration ---------------------------------------------------

extensions = [
    "autoapi.extension",
    "sphinx.ext.napoleon",        # NumPy docstrings
    "sphinx.ext.viewcode",        # source links
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
    "sphinx_design",
    "myst_parser",
]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

myst_enable_extensions = [
    "colon_fence",
    "deflist",
]

templates_path = ["_templates"]
exclude_patterns = []

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

html_show_sourcelink = True

# ── AutoAPI (Python backend) ────────────────────────────────────────────────
autoapi_type = "python"
autoapi_dirs = [str(REPO_ROOT / "portfolio_site")]
autoapi_add_toctree_entry = False
add_module_names = False
autoapi_keep_files = True
autoapi_root = "backend_api"
autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
    "imported-members",
    "show-source",
]
autoapi_member_order = "bysource"
autoapi_python_class_content = "class"
autoapi_ignore = [
    "*__pycache__*",
]

# ---- Theme ----
html_theme = "sphinx_rtd_theme"
html_title = project
html_static_path = ["_static"]

napoleon_google_docstring = False
napoleon_numpy_docstring = True
