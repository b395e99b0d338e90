import sys

from kaitai_expr.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
