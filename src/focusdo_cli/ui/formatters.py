"""Text formatters for the timer display."""

from datetime import timedelta

_TENTH_US = 100_000


def format_duration(d: timedelta) -> str:
    """Format a duration rounded to the nearest tenth of a second.

    Examples: ``5.3``, ``2:05.5``, ``1:02:05.0``.
    """
    micros = d // timedelta(microseconds=1)
    # Round half away from zero
    if micros >= 0:
        tenths = (micros + _TENTH_US // 2) // _TENTH_US
    else:
        tenths = -((-micros + _TENTH_US // 2) // _TENTH_US)

    sign = "-" if tenths < 0 else ""
    tenths = abs(tenths)

    seconds, t = divmod(tenths, 10)
    minutes, s = divmod(seconds, 60)
    h, m = divmod(minutes, 60)

    if h > 0:
        return f"{sign}{h}:{m:02d}:{s:02d}.{t}"
    if m > 0:
        return f"{sign}{m}:{s:02d}.{t}"
    return f"{sign}{s}.{t}"
