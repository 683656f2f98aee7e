import sys

from matrixmaster.cli import main

sys.exit(main())
