"""
Campus Web — Greeting Resolver
===============================

What:  Time-of-day and seasonal greetings shown in the site header.
How:   Pure functions of the wall clock. Callers may pass `now` to pin the clock.

Seasonal bands (calendar months):
    December, February     → winter
    March – May            → spring
    June – August          → summer
    September – November   → fall
    January                → no greeting (returns None)
"""

from datetime import datetime
from typing import Optional

MORNING_GREETING = "Good Morning!"
AFTERNOON_GREETING = "Good Afternoon!"
EVENING_GREETING = "Good Evening!"

WINTER_GREETING = "🥶 Frosty greetings from someone who hasn’t felt their toes since November."
SPRING_GREETING = "🪻 May your spring be sunny and your antihistamines strong."
SUMMER_GREETING = "🌞 Warm summer wishes from the land of iced drinks and questionable tan lines."
FALL_GREETING = "🍂 Happy Fall! May your pumpkin spice be strong and your rakes be sturdy."


def current_time_greeting(now: Optional[datetime] = None) -> str:
    """Return the greeting for the current hour (half-open bands at 12 and 18)."""
    hour = (now or datetime.now()).hour

    if hour < 12:
        return MORNING_GREETING
    if hour < 18:
        return AFTERNOON_GREETING
    return EVENING_GREETING


def current_seasonal_greeting(now: Optional[datetime] = None) -> Optional[str]:
    """
    Return the seasonal greeting for the current month.

    January matches none of the bands and yields None. The site has always
    shipped that way; pages render an empty paragraph for it.
    """
    month = (now or datetime.now()).month

    if month in (12, 2):
        return WINTER_GREETING
    if 3 <= month <= 5:
        return SPRING_GREETING
    if 6 <= month <= 8:
        return SUMMER_GREETING
    if 9 <= month <= 11:
        return FALL_GREETING
    return None


def wrap_paragraph(text: Optional[str]) -> str:
    """Wrap a greeting in paragraph markup; None becomes an empty paragraph."""
    return f"<p>{text or ''}</p>"
