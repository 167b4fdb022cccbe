import sys

from puri_platformer.app import main

sys.exit(main())
