"""``python -m polysolver_pkg``: the same command line as the ``polysolver`` script.

With ``-e "x^2-5x+6=0"`` one equation is solved and the exit status tells
whether it produced a result; without it an interactive prompt starts.
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
