import sys

from tileimg.scripts.render_tiles import main

sys.exit(main())
