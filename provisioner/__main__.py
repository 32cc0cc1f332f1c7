"""Provisioner entry point."""

import sys

import click

from provisioner.cli.app import cli


def main():
    """Main entry point."""
    try:
        cli(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        # Exit cleanly without showing traceback
        print("\nProvisioning cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except click.exceptions.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except Exception as e:
        # Show clean error message instead of full traceback
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
