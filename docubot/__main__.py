#!/usr/bin/env python3
"""
Main entry point for running Docubot as a module
Enables: python -m docubot [--pr-number N] [--dry-run]
"""

from .main import main

if __name__ == "__main__":
    main()
