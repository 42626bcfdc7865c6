"""Allow ``python -m create_vv``."""

from create_vv.cli import main

if __name__ == "__main__":
    main()
