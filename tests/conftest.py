"""
Pytest configuration for qrab tests.
"""
import sys
import os

# Make `import qrab...` work from a plain checkout (src/ on sys.path).
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)
