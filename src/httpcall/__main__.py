"""
Entry point for ``python -m httpcall``.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from httpcall.cli import main

if __name__ == "__main__":
    main()
