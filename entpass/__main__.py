"""
EntPass Module Entry Point
===========================

Allows running the EntPass CLI via: python -m entpass
"""

from entpass.cli import main

if __name__ == "__main__":
    main()
