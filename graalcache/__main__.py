"""
Entry point for running graalcache CLI as a module.

Usage: python -m graalcache [command] [options]
"""

from graalcache.cli.parser import main

if __name__ == "__main__":
    main()
