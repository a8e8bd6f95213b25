import sys
from pathlib import Path
from typing import Annotated

from rich.progress import track
from typer import Typer, Exit, Option

from . import TimedMarkup, unit_tests
from .equals import diff_any, diff_parsed
from .generate import Random


def FAILED(message: str):
    print(f"FAILED {message}", file=sys.stderr)
    raise Exit(code=1)


app = Typer()
profile_option = Option(
    help="write profile stats here (fail if already exists)",
    file_okay=False,
    dir_okay=False,
)
loops_option = Option(
    help="number of repetitions",
    min=0,
)
deepest_option = Option(
    help="limit the depth of generated random documents",
    min=0,
)
widest_option = Option(
    help="limit the number of children of each generated element",
    min=0,
)
step_option = Option(
    help="spaces per level of indent (zero or less disables indenting)",
)


@app.command(
    help="""Run unit tests, then write random documents and parse them back.

    Without the `pstats` option broad timing information is gathered, comparing the
    cached indents against ones recreated every time. The `pstats` option switches to
    detailed cProfile stats, focused only on the cached indents.""",
)
def main(
    pstats: Annotated[Path | None, profile_option] = None,
    loops: Annotated[int, loops_option] = 250,
    deepest: Annotated[int, deepest_option] = 8,
    widest: Annotated[int, widest_option] = 6,
    step: Annotated[int, step_option] = 3,
):
    if pstats and pstats.exists():
        FAILED(f"won't overwrite: {pstats}")

    if unit_tests.run_all_tests_return_problem_count():
        FAILED("unit tests")

    random = Random(deepest=deepest, widest=widest)
    markup = TimedMarkup(step, pstats)

    if loops:
        for loop in track(range(loops)):
            root = random.document()
            encoded = markup.encode(root)

            if diff_parsed(root, encoded):
                FAILED("encode then parse")

            reference = markup.reference(root)
            if reference is not None and diff_any(reference, encoded):
                FAILED("cached versus uncached")

        markup.timers()


if __name__ == "__main__":
    app()
