import sys

from img2ascii.cli import main

sys.exit(main())
