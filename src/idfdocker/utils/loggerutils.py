import logging
from typing import NoReturn, Optional

logger = logging.getLogger("idfdocker")


def die(msg: Optional[str], details: Optional[str]=None, status: int=1) -> NoReturn:
    if msg:
        print("ERROR: " + msg)
    if details:
        print(details)
    raise SystemExit(status)


def warn(msg: str, details: Optional[str]=None) -> None:
    print("WARNING: " + msg)
    if details:
        print(details)

def note(msg):
    print(msg)
