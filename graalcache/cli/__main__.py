"""
Entry point for running graalcache CLI as a module.

Usage: python -m graalcache.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
