import sys

from .errors import EcError
from . import tools


def _run(command):
    try:
        command()
    except (EcError, ValueError) as e:
        print("error: " + str(e), file=sys.stderr)
        sys.exit(1)


def cmd_ecdemo():
    _run(tools.demo)


def cmd_ecpoints():
    _run(tools.list_points)


def cmd_eckeygen():
    _run(tools.keygen)
