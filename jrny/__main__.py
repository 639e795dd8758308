"""Allow ``python -m jrny``."""

from jrny.cli import main

main()
