"""Allow running the scanner with ``python -m docscan``."""
from .main import main

main()
