"""
User-facing output for the drag command.

Progress goes to stdout, errors go to stderr with an ERROR: prefix.
"""

import random
import sys

QUOTES = [
    "Now Sashay Away!",
    "And If I fly or if I fall, at least I can say I gave it all!",
    "When you become the image of your own imagination, it's the most powerful thing you could ever do.",
    "We're born naked, and the rest is drag.",
    "I dance to the beat of a different drummer.",
    "All sins are forgiven once you start making a lot of money.",
    "With hair, heels, and attitude, honey, I am through the roof!",
    "When the going gets tough, the tough reinvent.",
    "We are all doing drag. Every single person on this planet is doing it.",
    "The amount of respect you have for others is in direct proportion to how much respect you have for yourself.",
    "It’s as if our culture is addicted to fear and the flat screen is our drug dealer.",
    "Through my observations, it became clear that most of society’s rules and customs are rooted in fear and superstition!",
    "Life is about using the whole box of crayons.",
    "Reading is fundamental.",
    "Drag queens have always taken on that role of spilling the tea - and the tea is the emperor has no clothes!",
    "In our subconscious, we all know we're playing roles.",
    "Life is not to be taken seriously.",
    "It's very easy to look at the world and think this is all so cruel and so mean. It's important to not become bitter from it.",
    "To understand humans, you must study them as a species of animal.",
    "There are only two types of people in the world. There are the people who understand that this is a matrix, and then there are the people who buy it lock, stock and barrel.",
    "The gift you can give to other people is allowing them to give you something.",
    "Live your life in the now, because you get to a certain age and you realize, “Wow, that was fast.",
    "There’s not enough dancing in the world. And the fact that there are no daytime discos right now is indicative of the trouble we’re in as a society.",
    "You have to find a tribe.",
]

ERROR_PREFIX = "ERROR:"


def random_quote(rng=random) -> str:
    return rng.choice(QUOTES)


class Reporter:
    """Prints progress and errors for a single run."""

    def __init__(self, stream=None, error_stream=None, rng=random):
        self.stream = stream
        self.error_stream = error_stream
        self.rng = rng

    def info(self, message: str) -> None:
        print(message, file=self.stream or sys.stdout)

    def error(self, message: str) -> None:
        print(f"{ERROR_PREFIX} {message}", file=self.error_stream or sys.stderr)

    def quote(self) -> None:
        self.info(f"👸 Random RuPaul quote: \"{random_quote(self.rng)}\"")
