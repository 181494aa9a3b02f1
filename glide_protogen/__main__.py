# SPDX-License-Identifier: Apache-2.0
import sys

from glide_protogen.cli.main import main

sys.exit(main())
