import os
import sys

# Make the fabricate package importable for autodoc
sys.path.insert(0, os.path.abspath('../../'))

project = 'fabricate'
author = 'Chris Gough'
release = '0.1'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
]

autodoc_member_order = 'bysource'
napoleon_google_docstring = True
napoleon_numpy_docstring = False

exclude_patterns = ['_build']
html_theme = 'alabaster'
