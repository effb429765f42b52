import sys

from MeteoClientPy.cli import main

sys.exit(main())
