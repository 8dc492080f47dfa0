import sys

from snake_terminal.main import main

sys.exit(main())
