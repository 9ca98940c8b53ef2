import sys

from xml_validator.cli.main import main

sys.exit(main())
