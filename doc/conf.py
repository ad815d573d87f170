# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import re
import sys

sys.path.insert(0, os.path.abspath('..'))
import qcgates


# -- Project information -----------------------------------------------------

project = 'qcgates'
copyright = '2026, the qcgates developers'
author = 'the qcgates developers'

# The full version, including alpha/beta/rc tags.
release = qcgates.__version__

# The short X.Y version.
version = re.match(r'^(\d+\.\d+)', release).expand(r'\1')


# -- General configuration -----------------------------------------------------

# If your documentation needs a minimal Sphinx version, state it here.
needs_sphinx = '3.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.mathjax',
    'sphinx.ext.napoleon',
]

# Add any paths that contain templates here, relative to this directory.
templates_path = ['_templates']

today_fmt = '%Y-%m-%d'

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# If true, '()' will be appended to :func: etc. cross-reference text.
add_function_parentheses = False

# The name of the Pygments (syntax highlighting) style to use.
pygments_style = 'sphinx'


# -- Options for HTML output ---------------------------------------------------

html_theme = 'nature'

#=========================================================================

# the order in which autodoc lists the documented members
autodoc_member_order = 'bysource'

# documentation source for classes
autoclass_content = 'both'

# latex macros
mathjax3_config = {
    'tex': {
        'macros': {
            'reals': r'\mathbb{R}',
            'trace': r'\mathrm{Tr}',
        }
    }
}
