import sys

from .presentation.cli.analyze_protein import main

sys.exit(main())
