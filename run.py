"""
Entry Point Script (Bootstrap)
==============================
Convenience runner for development without installing the package.

It modifies 'sys.path' so Python can resolve imports like
'from strategycalc.model...' from the 'src' directory.

Usage:
    $ python run.py --days 5 --seed 42
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from strategycalc.main import main

if __name__ == "__main__":
    main()
