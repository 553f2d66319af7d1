#!/usr/bin/env python3
"""
PorkDyn - Main Entry Point

This is the main entry point for PorkDyn.
It can be run directly or imported as a module.
"""

from porkdyn.cli.main import main

if __name__ == "__main__":
    main()
