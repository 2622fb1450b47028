import sys

from dateslice.cli import main

sys.exit(main())
