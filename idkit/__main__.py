import sys

from idkit.cli import main

sys.exit(main())
