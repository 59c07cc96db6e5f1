import sys

from spell_dictionary.cli import main

sys.exit(main())
