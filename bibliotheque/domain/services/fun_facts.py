"""Page-count milestone messages."""

from dataclasses import dataclass
from typing import Callable

from ..entities.reading_stats import FunFact

PAGES_PER_NOVEL = 250
LORD_OF_THE_RINGS_PAGES = 1178
EVEREST_HEIGHT_MM = 8_849_000


@dataclass(frozen=True)
class FunFactTemplate:
    """A milestone threshold and the message shown once it is reached."""

    threshold: int
    render: Callable[[int], str]


FUN_FACTS: tuple[FunFactTemplate, ...] = (
    FunFactTemplate(0, lambda pages: "Start your reading journey, every page is an adventure!"),
    FunFactTemplate(
        100,
        lambda pages: (
            f"You've read {pages:,} pages, that's taller than a stack of "
            f"{pages // PAGES_PER_NOVEL} novels!"
        ),
    ),
    FunFactTemplate(
        500,
        lambda pages: (
            f"{pages:,} pages read, that's about the height of "
            f"{pages * 0.1 / 25.4:.1f} rulers stacked up!"
        ),
    ),
    FunFactTemplate(
        1000,
        lambda pages: (
            f"{pages:,} pages! If laid end to end, that's about "
            f"{pages * 0.24 / 1000:.1f}km of text!"
        ),
    ),
    FunFactTemplate(
        3000,
        lambda pages: (
            f"{pages:,} pages, you've read the equivalent of the entire Lord of the Rings "
            f"{pages / LORD_OF_THE_RINGS_PAGES:.1f} times!"
        ),
    ),
    FunFactTemplate(
        5000,
        lambda pages: (
            f"{pages:,} pages! That's like climbing Mount Everest "
            f"{pages * 0.1 / EVEREST_HEIGHT_MM:.4f} times in paper height... ok, you'll get there!"
        ),
    ),
    FunFactTemplate(8000, lambda pages: f"{pages:,} pages of pure literary adventure. You're a reading machine!"),
    FunFactTemplate(10000, lambda pages: f"{pages:,} pages! You've entered the 10K club. That's legendary."),
)


def select_fun_fact(total_pages: int) -> FunFact:
    """Pick the message for the highest milestone ``total_pages`` has reached.

    Thresholds are scanned in ascending order and the last one satisfied
    wins. Totals below every threshold get the first message.
    """
    chosen = FUN_FACTS[0]
    for template in FUN_FACTS:
        if total_pages >= template.threshold:
            chosen = template
    return FunFact(threshold=chosen.threshold, text=chosen.render(total_pages))
