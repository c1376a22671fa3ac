import sys

from maptiler_cloud.cli import main

sys.exit(main())
