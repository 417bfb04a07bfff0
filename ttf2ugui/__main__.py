import sys

from ttf2ugui.cli import main

if (__name__ == '__main__'):
    sys.exit(main())
