"""
Package entry point: ``python -m notifyops``.
"""

from .main import run

if __name__ == "__main__":
    run()
