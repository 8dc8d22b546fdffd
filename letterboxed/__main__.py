import sys

from letterboxed.cli import main

sys.exit(main())
