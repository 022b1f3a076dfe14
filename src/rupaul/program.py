"""
Command line entry point.

RuPaul helps you run a nais app locally with docker-compose.
"""

from typing import List

from invoke import Program

from rupaul import __version__
from rupaul.tasks import namespace

MANIFEST_FLAGS = ("--manifest", "-m")


def split_extra_args(argv: List[str], task_name: str = "drag") -> List[str]:
    """Move positional words after the manifest behind ``--``.

    invoke reads every bare word as a task name, so ``rupaul drag nais.yaml
    extra`` would fail on ``extra``. Words after the manifest go to invoke's
    remainder instead, ahead of anything already given after ``--``.
    """
    if task_name not in argv[1:]:
        return list(argv)

    start = argv.index(task_name, 1) + 1
    words, remainder = argv[start:], []
    if "--" in words:
        cut = words.index("--")
        words, remainder = words[:cut], words[cut + 1:]

    kept, extra = [], []
    have_manifest = False
    takes_value = False
    for word in words:
        if takes_value:
            kept.append(word)
            takes_value = False
            have_manifest = True
        elif word in MANIFEST_FLAGS:
            kept.append(word)
            takes_value = True
        elif word.startswith("-"):
            kept.append(word)
            if word.startswith("--manifest="):
                have_manifest = True
        elif not have_manifest:
            kept.append(word)
            have_manifest = True
        else:
            extra.append(word)

    if not extra:
        return list(argv)
    return list(argv[:start]) + kept + ["--"] + extra + list(remainder)


class RuPaulProgram(Program):
    """invoke Program that accepts and ignores extra words after the manifest."""

    def normalize_argv(self, argv):
        super().normalize_argv(argv)
        self.argv = split_extra_args(self.argv)


program = RuPaulProgram(
    name="rupaul - The Queen of Nais!",
    binary="rupaul",
    namespace=namespace,
    version=__version__,
)
