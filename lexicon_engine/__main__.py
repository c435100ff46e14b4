import sys

from lexicon_engine.cli.cli import main

sys.exit(main())
