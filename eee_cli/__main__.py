import sys

from eee_cli.main import main

sys.exit(main())
