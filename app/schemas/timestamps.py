from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator


def drop_timezone(value: datetime) -> datetime:
    """Keep the wall-clock time as sent; an offset, if any, is discarded."""
    return value.replace(tzinfo=None)


# Timestamp columns are timezone-naive, so a late-evening "-03:00" activity
# stays on the calendar day the client picked.
WallClockDateTime = Annotated[datetime, AfterValidator(drop_timezone)]
