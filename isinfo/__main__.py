import sys

from isinfo.cli.main import main

sys.exit(main())
