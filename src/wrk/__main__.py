from wrk.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `wrk` console script."""
    cli()


if __name__ == "__main__":
    main()
