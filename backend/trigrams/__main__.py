import sys

from trigrams.cli import main

sys.exit(main())
