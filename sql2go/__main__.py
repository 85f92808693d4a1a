"""Allow running sql2go with ``python -m sql2go``."""

from .main import main

if __name__ == "__main__":
    main()
