import sys

from flowcraft.cli.main import main

sys.exit(main())
