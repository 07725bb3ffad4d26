import sys

from image_unpacker.main_unpack import main

sys.exit(main())
