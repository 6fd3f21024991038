"""Entry point for `python -m rnboot.cli` invocation.

This module enables running the CLI via:
    python -m rnboot.cli [command] [options]
"""


def main():
    """Run the launcher."""
    from rnboot.cli.app import main as launcher_main

    launcher_main()


if __name__ == "__main__":
    main()
