import os
import random
from datetime import datetime, timezone


def append_timestamp_to_file(
    filename: str,
    *,
    now: datetime | None = None,
    rand: random.Random | None = None,
) -> str:
    """Insert a ``_YYYYMMDDHHMMSS_NNNN`` token before the file extension.

    Only the last dot of the final path component counts as the extension
    separator; a name without one gets the token appended at the end.
    Example: ``reports/out.pdf`` -> ``reports/out_20250206153045_1234.pdf``.
    """
    moment = now or datetime.now(timezone.utc)
    number = (rand or random).randint(0, 9999)
    token = f"{moment.strftime('%Y%m%d%H%M%S')}_{number}"

    head, tail = os.path.split(filename)
    dot = tail.rfind(".")
    if dot == -1:
        return os.path.join(head, f"{tail}_{token}")
    return os.path.join(head, f"{tail[:dot]}_{token}{tail[dot:]}")
