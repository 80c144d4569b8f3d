import argparse
import asyncio
import logging
import sys
from joblens.config.settings import settings
from joblens.core.board import JobBoard
from joblens.core.errors import ParseError
from joblens.core.models import FilterCriteria, SortKey
from joblens.render.details import format_job_details, format_job_list

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Filter and sort a JSON file of job postings.")
    parser.add_argument("path", nargs="?", help="JSON file containing an array of jobs")
    parser.add_argument("--level", default=settings.ALL_OPTION)
    parser.add_argument("--type", default=settings.ALL_OPTION)
    parser.add_argument("--skill", default=settings.ALL_OPTION)
    parser.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        default=settings.DEFAULT_SORT,
    )
    parser.add_argument(
        "--details", type=int, metavar="N", help="Show details for the Nth listed job"
    )
    return parser


async def main(argv=None) -> int:
    """
    Main entry point.
    """
    args = build_parser().parse_args(argv)
    board = JobBoard()

    try:
        view = await board.load_file(args.path)
    except ParseError as e:
        print(f"Error processing file: {e}")
        return 1

    if view is None:
        return 0

    criteria = FilterCriteria(level=args.level, type=args.type, skill=args.skill)
    view = board.query(criteria, SortKey(args.sort))
    print(format_job_list(view))

    if args.details is not None:
        if not 1 <= args.details <= len(view):
            logger.warning(f"No job number {args.details} in a list of {len(view)}.")
            return 1
        print()
        print(format_job_details(view.rows[args.details - 1].job))

    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
