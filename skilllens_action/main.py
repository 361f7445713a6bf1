import asyncio
import sys

from skilllens_action.workflows.recommendation_workflow import run_recommendation_workflow


def main() -> int:
    """Run the action and translate the result into a process exit code."""
    result = asyncio.run(run_recommendation_workflow())
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())
