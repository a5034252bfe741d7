import sys

from tidal_harmonics.cli.main import main

sys.exit(main())
