"""
PwGuard Module Entry Point
===========================

Allows running the PwGuard CLI via: python -m pwguard
"""

from pwguard.cli import main

if __name__ == "__main__":
    main()
