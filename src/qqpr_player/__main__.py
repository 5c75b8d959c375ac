import sys

from qqpr_player.cli import main


sys.exit(main())
