#!/usr/bin/env python3
"""
Enable execution of the db_provisioner package as a module.

This allows running the package with: python -m db_provisioner
"""

from .cli.main import main

if __name__ == "__main__":
    main()
