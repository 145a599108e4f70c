import sys

from .cli.repro import main

sys.exit(main())
