from __future__ import annotations

from pathlib import Path

from command_runner import CommandLine, CommandRunner, DefaultCommandRunner
from command_runner.logging import setup_logging
from command_runner.testing import TestCommandRunner


def current_branch(runner: CommandRunner, repo: Path) -> str:
    result = runner.run_checked(CommandLine(["git", "branch", "--show-current"]), repo)
    return result.stdout().strip()


def main() -> None:
    setup_logging("DEBUG")

    print(current_branch(DefaultCommandRunner(), Path.cwd()))

    fake = TestCommandRunner.with_output(0, "main\n")
    assert current_branch(fake, Path("/repo")) == "main"
    print(fake.issued_commands)


if __name__ == "__main__":
    main()
