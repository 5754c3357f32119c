import sys

from password_hashing.cli import main


if __name__ == "__main__":
    sys.exit(main())
