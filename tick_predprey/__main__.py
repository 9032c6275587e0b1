import sys

from tick_predprey.cli import main

sys.exit(main())
