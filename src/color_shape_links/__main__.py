import sys

from color_shape_links.cli import main

sys.exit(main())
